"""Normalizer: turns Java source text into a CompilationUnit.

Usage:
    normalizer = JavaNormalizer()
    unit = normalizer.parse_source(content, "src/p/A.java")
    for problem in unit.problems:
        ...
"""

from __future__ import annotations

from typing import Any, Optional

from ..exceptions import ParsingError
from .syntax import CompilationUnit, ParseProblem
from .treesitter_parser import JavaParser, iter_nodes, node_text

_SNIPPET_LENGTH = 40


class JavaNormalizer:
    """Parses source text and collects recoverable syntax problems."""

    def __init__(self, parser: Optional[JavaParser] = None) -> None:
        self._parser = parser or JavaParser()

    def parse_source(self, source: str, file_name: str) -> CompilationUnit:
        """Parse ``source`` into a best-effort CompilationUnit.

        Syntax errors never raise; they are reported in ``unit.problems``.

        Raises:
            ParsingError: If the parser itself fails and returns no tree
        """
        code = source.encode("utf-8", errors="replace")
        try:
            tree = self._parser.parse(code)
        except (ValueError, RuntimeError) as e:
            raise ParsingError(file_name, str(e)) from e
        return CompilationUnit(
            path=file_name,
            source=source,
            code=code,
            tree=tree,
            problems=self._collect_problems(tree.root_node),
        )

    def _collect_problems(self, root: Any) -> list[ParseProblem]:
        if not root.has_error:
            return []

        problems = []
        for node in iter_nodes(root, prune=lambda n: n.is_error):
            if node.is_error:
                problems.append(self._problem(node, f"Syntax error near '{_snippet(node)}'"))
            elif node.is_missing:
                problems.append(self._problem(node, f"Missing '{node.type}'"))
        return problems

    @staticmethod
    def _problem(node: Any, message: str) -> ParseProblem:
        row, column = node.start_point
        return ParseProblem(line=row + 1, column=column + 1, message=message)


def _snippet(node: Any) -> str:
    text = " ".join(node_text(node).split())
    if len(text) > _SNIPPET_LENGTH:
        return text[: _SNIPPET_LENGTH - 3] + "..."
    return text


_default_normalizer: Optional[JavaNormalizer] = None


def parse_source(source: str, file_name: str = "<string>") -> CompilationUnit:
    """Parse with a shared module-level normalizer."""
    global _default_normalizer
    if _default_normalizer is None:
        _default_normalizer = JavaNormalizer()
    return _default_normalizer.parse_source(source, file_name)
