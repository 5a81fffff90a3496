"""AST facade over tree-sitter Java trees.

The metric engine only sees the types defined here:

    CompilationUnit  one parsed source file
    TypeNode         class / interface / enum / annotation type declaration
    MethodNode       method or constructor declaration
    ParseProblem     a recoverable syntax problem

Everything is a read-only view onto the underlying tree; nothing is copied
out of it except names.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from typing import Any, Optional

from .treesitter_parser import iter_nodes, node_text


class TypeKind(str, Enum):
    """Kinds of type declaration."""

    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    ANNOTATION_TYPE = "annotation_type"


TYPE_DECLARATIONS: dict[str, TypeKind] = {
    "class_declaration": TypeKind.CLASS,
    "record_declaration": TypeKind.CLASS,
    "interface_declaration": TypeKind.INTERFACE,
    "enum_declaration": TypeKind.ENUM,
    "annotation_type_declaration": TypeKind.ANNOTATION_TYPE,
}

METHOD_DECLARATIONS = frozenset(
    {"method_declaration", "constructor_declaration", "compact_constructor_declaration"}
)

COMMENT_NODES = frozenset({"comment", "line_comment", "block_comment"})


def is_method_declaration(node: Any) -> bool:
    return node.type in METHOD_DECLARATIONS


@dataclass(frozen=True)
class ParseProblem:
    """A syntax problem the parser recovered from."""

    line: int
    column: int
    message: str

    def __str__(self) -> str:
        return f"line {self.line}:{self.column}: {self.message}"


@dataclass(eq=False)
class MethodNode:
    """A method or constructor declaration."""

    node: Any

    @property
    def name(self) -> str:
        name_node = self.node.child_by_field_name("name")
        return node_text(name_node) if name_node is not None else ""

    @property
    def is_constructor(self) -> bool:
        return self.node.type != "method_declaration"

    @property
    def modifiers(self) -> frozenset[str]:
        """Modifier keywords as written in the source (annotations excluded)."""
        for child in self.node.children:
            if child.type == "modifiers":
                return frozenset(c.type for c in child.children if not c.is_named)
        return frozenset()

    @property
    def body(self) -> Optional[Any]:
        """The body block, or None for abstract, native and interface signatures."""
        return self.node.child_by_field_name("body")

    @property
    def start_line(self) -> int:
        return self.node.start_point[0] + 1


@dataclass(eq=False)
class TypeNode:
    """A type declaration, top-level or member."""

    node: Any
    outer: Optional[TypeNode] = None

    @property
    def kind(self) -> TypeKind:
        return TYPE_DECLARATIONS[self.node.type]

    @property
    def name(self) -> str:
        name_node = self.node.child_by_field_name("name")
        return node_text(name_node) if name_node is not None else ""

    @property
    def is_top_level(self) -> bool:
        return self.outer is None

    @property
    def span(self) -> tuple[int, int]:
        """``(start_offset, length)`` in bytes, Javadoc included when attached."""
        start = self.node.start_byte
        # Nearest Javadoc, looking back over plain comments only
        previous = self.node.prev_sibling
        while previous is not None and previous.type in COMMENT_NODES:
            text = node_text(previous)
            if text.startswith("/**") and text != "/**/":
                start = previous.start_byte
                break
            previous = previous.prev_sibling
        return start, self.node.end_byte - start

    def _members(self) -> list[Any]:
        body = self.node.child_by_field_name("body")
        if body is None:
            return []
        members = []
        for child in body.named_children:
            if child.type == "enum_body_declarations":
                members.extend(child.named_children)
            else:
                members.append(child)
        return members

    @property
    def methods(self) -> list[MethodNode]:
        """Methods and constructors declared directly in this type."""
        return [MethodNode(m) for m in self._members() if is_method_declaration(m)]

    @property
    def nested_types(self) -> list[TypeNode]:
        """Member type declarations directly in this type's body."""
        return [
            TypeNode(m, outer=self) for m in self._members() if m.type in TYPE_DECLARATIONS
        ]


@dataclass(eq=False)
class CompilationUnit:
    """One parsed Java source file."""

    path: str
    source: str
    code: bytes
    tree: Any
    problems: list[ParseProblem] = field(default_factory=list)

    @property
    def root(self) -> Any:
        return self.tree.root_node

    @cached_property
    def lines(self) -> list[str]:
        return self.source.split("\n")

    @cached_property
    def _line_starts(self) -> list[int]:
        starts = [0]
        index = self.code.find(b"\n")
        while index != -1:
            starts.append(index + 1)
            index = self.code.find(b"\n", index + 1)
        return starts

    def line_of(self, offset: int) -> int:
        """1-indexed line number of a byte offset."""
        return max(bisect_right(self._line_starts, offset), 1)

    @cached_property
    def package_name(self) -> str:
        for child in self.root.named_children:
            if child.type == "package_declaration":
                for part in child.named_children:
                    if part.type in ("identifier", "scoped_identifier"):
                        return "".join(node_text(part).split())
        return ""

    @cached_property
    def types(self) -> list[TypeNode]:
        """Top-level type declarations in source order."""
        return [TypeNode(child) for child in self.root.named_children if child.type in TYPE_DECLARATIONS]

    @cached_property
    def file_methods(self) -> list[MethodNode]:
        """Every method in the file that is not inside another method's body.

        Includes methods of member types and of anonymous classes in field
        initializers; bodies are not entered.
        """
        return [
            MethodNode(node)
            for node in iter_nodes(self.root, prune=is_method_declaration)
            if is_method_declaration(node)
        ]
