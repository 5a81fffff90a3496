"""Shared test fixtures for promise-metrics."""

from pathlib import Path
from textwrap import dedent

import pytest

from promise_metrics.scanning.normalizer import JavaNormalizer
from promise_metrics.scanning.syntax import CompilationUnit, MethodNode

_normalizer = JavaNormalizer()


def _parse_java(source: str, file_name: str = "Test.java") -> CompilationUnit:
    return _normalizer.parse_source(dedent(source), file_name)


def _method_in(body: str, signature: str = "void m()") -> MethodNode:
    unit = _parse_java(f"class T {{\n  {signature} {{\n{body}\n  }}\n}}\n")
    return unit.types[0].methods[0]


SAMPLE_A = """\
package p;
public class A {
  public int f(int x) { if (x>0 && x<10) return x; else return -x; }
}
"""

SAMPLE_NESTED = """\
package p;

/**
 * Outer class.
 */
public class Outer {
    public void a() {}

    void b() {
        if (true) {
            return;
        }
    }

    public static class Inner {
        public void c() {}

        class Deep {
            void d() {}
        }
    }
}
"""

SAMPLE_INTERFACE = """\
package q;

public interface B {
    void run();
    int size();
    String name(String prefix);
}
"""


@pytest.fixture
def parse_java():
    """Parse a (dedented) Java snippet into a CompilationUnit."""
    return _parse_java


@pytest.fixture
def method_in():
    """Wrap a statement list in ``class T { void m() { ... } }`` and return the method."""
    return _method_in


@pytest.fixture
def sample_a() -> str:
    return SAMPLE_A


@pytest.fixture
def sample_nested() -> str:
    return SAMPLE_NESTED


@pytest.fixture
def java_tree(tmp_path: Path) -> Path:
    """A small source tree with three Java files in two packages."""
    root = tmp_path / "src"
    (root / "p").mkdir(parents=True)
    (root / "q").mkdir()
    (root / "p" / "A.java").write_text(SAMPLE_A)
    (root / "p" / "Outer.java").write_text(SAMPLE_NESTED)
    (root / "q" / "B.java").write_text(SAMPLE_INTERFACE)
    (root / "README.txt").write_text("not java\n")
    return root
