"""Tests for cyclomatic complexity."""

import pytest

from promise_metrics.metrics.complexity import cyclomatic_complexity, decision_points


class TestCyclomaticComplexity:
    """Test decision-point rules one at a time."""

    def test_empty_body(self, method_in):
        assert cyclomatic_complexity(method_in("")) == 1

    def test_straight_line(self, method_in):
        assert cyclomatic_complexity(method_in("int a = 1;\nint b = a + 2;")) == 1

    @pytest.mark.parametrize(
        "body",
        [
            "if (x) { }",
            "for (int i = 0; i < 3; i++) { }",
            "for (String s : items) { }",
            "while (x) { }",
            "do { } while (x);",
            "try { } catch (Exception e) { }",
            "int y = x ? 1 : 2;",
            "boolean b = x && y;",
            "boolean b = x || y;",
        ],
    )
    def test_single_decision(self, method_in, body):
        assert cyclomatic_complexity(method_in(body)) == 2

    def test_else_does_not_count(self, method_in):
        assert cyclomatic_complexity(method_in("if (x) { } else { }")) == 2

    def test_else_if_counts_nested_if(self, method_in):
        assert cyclomatic_complexity(method_in("if (a) { } else if (b) { } else { }")) == 3

    def test_switch_labels(self, method_in):
        body = """
        switch (k) {
            case 1: break;
            case 2: break;
            case 3: break;
            default: break;
        }
        """
        assert cyclomatic_complexity(method_in(body)) == 5

    def test_stacked_labels_count_each(self, method_in):
        body = """
        switch (k) {
            case 1:
            case 2:
                break;
        }
        """
        assert cyclomatic_complexity(method_in(body)) == 3

    def test_multiple_catches(self, method_in):
        body = "try { } catch (RuntimeException e) { } catch (Exception e) { } finally { }"
        assert cyclomatic_complexity(method_in(body)) == 3

    def test_chained_and(self, method_in):
        assert cyclomatic_complexity(method_in("boolean b = a && b && c && d;")) == 4

    def test_mixed_operators(self, method_in):
        assert cyclomatic_complexity(method_in("if (a && b || c) { }")) == 4

    def test_bitwise_and_not_counted(self, method_in):
        assert cyclomatic_complexity(method_in("boolean b = x & y | z;")) == 1

    def test_ternary_inside_condition(self, method_in):
        assert cyclomatic_complexity(method_in("boolean b = x && (y ? p : q);")) == 3

    def test_scenario_method(self, method_in):
        body = "if (x>0 && x<10) return x; else return -x;"
        assert cyclomatic_complexity(method_in(body, signature="public int f(int x)")) == 3

    def test_lambda_body_counts(self, method_in):
        body = "Runnable r = () -> { if (x) { } };"
        assert cyclomatic_complexity(method_in(body)) == 2

    def test_anonymous_class_counts_toward_method(self, method_in):
        body = """
        new Thread() {
            public void run() {
                while (x) { }
            }
        }.start();
        """
        assert cyclomatic_complexity(method_in(body)) == 2

    def test_local_class_counts_toward_method(self, method_in):
        body = """
        class Local {
            void g() { for (;;) { } }
        }
        """
        assert cyclomatic_complexity(method_in(body)) == 2


class TestBodylessMethods:
    """Methods without a body have CC 1."""

    def test_abstract(self, parse_java):
        unit = parse_java("abstract class A { abstract int f(boolean a, boolean b); }")
        assert cyclomatic_complexity(unit.types[0].methods[0]) == 1

    def test_interface_signature(self, parse_java):
        unit = parse_java("interface I { void f(); }")
        assert cyclomatic_complexity(unit.types[0].methods[0]) == 1

    def test_constructor(self, parse_java):
        unit = parse_java("class A { A(int x) { if (x > 0) { } } }")
        assert cyclomatic_complexity(unit.types[0].methods[0]) == 2


class TestDecisionPoints:
    """Test the subtree counter."""

    def test_counts_whole_subtree(self, parse_java):
        unit = parse_java("class A { void f() { if (a) { while (b) { } } } }")
        assert decision_points(unit.root) == 2
