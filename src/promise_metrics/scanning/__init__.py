"""Parsing layer: tree-sitter Java parser, AST facade and file discovery."""

from .discovery import discover_sources, validate_source_dir
from .normalizer import JavaNormalizer, parse_source
from .syntax import CompilationUnit, MethodNode, ParseProblem, TypeKind, TypeNode
from .treesitter_parser import JavaParser, iter_nodes

__all__ = [
    "CompilationUnit",
    "JavaNormalizer",
    "JavaParser",
    "MethodNode",
    "ParseProblem",
    "TypeKind",
    "TypeNode",
    "discover_sources",
    "iter_nodes",
    "parse_source",
    "validate_source_dir",
]
