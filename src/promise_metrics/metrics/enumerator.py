"""Type enumeration and naming."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

from ..scanning.syntax import CompilationUnit, TypeNode


def qualified_name(package: str, simple_name: str, outer_name: Optional[str] = None) -> str:
    """Build ``package.Outer$Simple`` (or ``package.Simple`` for top-level types).

    ``outer_name`` is only the simple name of the directly enclosing type,
    never the full nesting chain.
    """
    local = f"{outer_name}${simple_name}" if outer_name else simple_name
    return f"{package}.{local}" if package else local


def enumerate_types(unit: CompilationUnit) -> Iterator[tuple[str, TypeNode]]:
    """Yield ``(fully_qualified_name, type_node)`` for every declared type.

    Depth-first pre-order over top-level and member types. Method bodies are
    not entered, so anonymous and local classes are not reported.
    """
    package = unit.package_name
    stack = list(reversed(unit.types))
    while stack:
        type_node = stack.pop()
        outer_name = type_node.outer.name if type_node.outer is not None else None
        yield qualified_name(package, type_node.name, outer_name), type_node
        stack.extend(reversed(type_node.nested_types))
