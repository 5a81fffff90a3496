"""Tree-sitter parser wrapper for Java.

Provides the raw parse step of the AST facade. tree-sitter parsers hold
mutable state, so each thread gets its own ``Parser`` while the compiled
``Language`` is shared.

Usage:
    parser = JavaParser()
    tree = parser.parse(code_bytes)
    for node in iter_nodes(tree.root_node):
        ...
"""

from __future__ import annotations

import threading
from typing import Any, Iterator, Optional

import tree_sitter
import tree_sitter_java

JAVA_LANGUAGE = tree_sitter.Language(tree_sitter_java.language())


class JavaParser:
    """Thread-safe wrapper around a tree-sitter Java parser."""

    def __init__(self) -> None:
        self._local = threading.local()

    @property
    def language(self) -> tree_sitter.Language:
        return JAVA_LANGUAGE

    def _parser(self) -> tree_sitter.Parser:
        parser = getattr(self._local, "parser", None)
        if parser is None:
            parser = tree_sitter.Parser(JAVA_LANGUAGE)
            self._local.parser = parser
        return parser

    def parse(self, code: bytes) -> tree_sitter.Tree:
        """Parse Java source bytes into a syntax tree.

        tree-sitter always returns a tree; syntax errors show up as ERROR or
        missing nodes inside it.
        """
        return self._parser().parse(code)


def iter_nodes(node: Any, prune: Optional[Any] = None) -> Iterator[Any]:
    """Yield ``node`` and its descendants in pre-order.

    Args:
        node: Root of the walk
        prune: Optional predicate; descendants of a node for which it returns
            True are skipped (the node itself is still yielded)
    """
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        if prune is not None and current is not node and prune(current):
            continue
        stack.extend(reversed(current.children))


def node_text(node: Any) -> str:
    """Decode a node's source text."""
    text = node.text
    if text is None:
        return ""
    return text.decode("utf-8", errors="replace")
