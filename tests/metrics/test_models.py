"""Tests for the ClassMetrics record."""

import dataclasses

import pytest

from promise_metrics.metrics.models import ClassMetrics


class TestFromComplexities:
    """Test the derived complexity columns."""

    def test_values(self):
        m = ClassMetrics.from_complexities("p.A", [1, 2, 3, 2], npm=2, loc=40)
        assert m.wmc == 8
        assert m.max_cc == 3
        assert m.method_count == 4
        assert m.amc == 2.0
        assert m.avg_cc == m.amc
        assert (m.npm, m.loc) == (2, 40)

    def test_no_methods(self):
        m = ClassMetrics.from_complexities("p.Empty", [], loc=1)
        assert (m.wmc, m.max_cc, m.method_count) == (0, 0, 0)
        assert m.amc == 0.0
        assert m.avg_cc == 0.0

    def test_fractional_average(self):
        m = ClassMetrics.from_complexities("p.A", [1, 2, 1, 1])
        assert m.amc == pytest.approx(1.25)


class TestInvariants:
    """Construction rejects inconsistent records."""

    def test_frozen(self):
        m = ClassMetrics("p.A")
        with pytest.raises(dataclasses.FrozenInstanceError):
            m.npm = 3

    def test_empty_name(self):
        with pytest.raises(ValueError):
            ClassMetrics("")

    def test_negative_value(self):
        with pytest.raises(ValueError):
            ClassMetrics("p.A", loc=-1)

    def test_wmc_below_max(self):
        with pytest.raises(ValueError):
            ClassMetrics("p.A", wmc=1, max_cc=2, method_count=1, amc=1.0, avg_cc=1.0)

    def test_amc_avg_mismatch(self):
        with pytest.raises(ValueError):
            ClassMetrics("p.A", wmc=2, max_cc=2, method_count=1, amc=2.0, avg_cc=1.0)

    def test_complexity_without_methods(self):
        with pytest.raises(ValueError):
            ClassMetrics("p.A", wmc=1, max_cc=1)
