"""Cyclomatic complexity.

CC = 1 + number of decision points in the method body:

    if, for, enhanced for, while, do-while     +1 each
    case / default label                       +1 each
    catch clause                               +1 each
    ?: conditional                             +1
    && / ||                                    +1 per operator

The walk covers everything inside the body, including lambdas, anonymous
classes and local classes.
"""

from __future__ import annotations

from typing import Any

from ..scanning.syntax import MethodNode
from ..scanning.treesitter_parser import iter_nodes

BRANCH_NODES = frozenset(
    {
        "if_statement",
        "for_statement",
        "enhanced_for_statement",
        "while_statement",
        "do_statement",
        "switch_label",
        "catch_clause",
        "ternary_expression",
    }
)

SHORT_CIRCUIT_OPERATORS = frozenset({"&&", "||"})


def _is_short_circuit(node: Any) -> bool:
    if node.type != "binary_expression":
        return False
    operator = node.child_by_field_name("operator")
    return operator is not None and operator.type in SHORT_CIRCUIT_OPERATORS


def decision_points(node: Any) -> int:
    """Count decision points in ``node`` and everything below it."""
    count = 0
    for current in iter_nodes(node):
        if current.type in BRANCH_NODES or _is_short_circuit(current):
            count += 1
    return count


def cyclomatic_complexity(method: MethodNode) -> int:
    """CC of one method; 1 when it has no body."""
    body = method.body
    if body is None:
        return 1
    return 1 + decision_points(body)
