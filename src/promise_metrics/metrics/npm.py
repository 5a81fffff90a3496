"""Number of public methods."""

from __future__ import annotations

from ..scanning.syntax import TypeNode


def count_public_methods(type_node: TypeNode) -> int:
    """Methods declared directly in ``type_node`` with an explicit ``public``.

    Interface methods are only counted when written ``public``; implicit
    publicity is not inferred.
    """
    return sum(1 for method in type_node.methods if "public" in method.modifiers)
