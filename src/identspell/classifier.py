"""
Significant Name Classifier

Only names that are being declared or bound are spell-checked; reading a
misspelled name someone else declared is not this file's fault.

Identifier axis:
    var asdf = 1;          function asdf(jkl) {}     class Asdf {}
    asdf = 1;              asdf: for (;;) {}         class A { jkl() {} }

Property axis:
    object.jkl = 1;        object['jkl'] = 1;        ({ jkl: 1, 'asdf': 2 })
"""

import logging
from typing import Any, Iterator, Optional

from identspell.model import Axis, Location, Occurrence

logger = logging.getLogger(__name__)

FUNCTION_TYPES = frozenset({"FunctionDeclaration", "FunctionExpression"})
CLASS_TYPES = frozenset({"ClassDeclaration", "ClassExpression"})


def _is_plain_assignment_target(node: Any, parent: Any) -> bool:
    return (
        parent.type == "AssignmentExpression"
        and getattr(parent, "operator", "=") == "="
        and parent.left is node
    )


def is_significant_identifier(node: Any, parent: Optional[Any]) -> bool:
    """True if the Identifier *node* declares or binds its name."""
    if parent is None:
        return False

    parent_type = parent.type
    if parent_type == "VariableDeclarator":
        return parent.id is node
    if parent_type == "AssignmentExpression":
        return _is_plain_assignment_target(node, parent)
    if parent_type in FUNCTION_TYPES:
        return parent.id is node or any(p is node for p in parent.params or ())
    if parent_type in CLASS_TYPES:
        return parent.id is node
    if parent_type == "MethodDefinition":
        return parent.key is node and not parent.computed
    if parent_type == "LabeledStatement":
        return parent.label is node
    return False


def _string_literal(node: Any) -> Optional[str]:
    if node is not None and node.type == "Literal" and isinstance(node.value, str):
        return node.value
    return None


def member_property(node: Any) -> Optional[Occurrence]:
    """The property occurrence of a MemberExpression, if it has a static name."""
    prop = node.property
    if prop.type == "Identifier" and not node.computed:
        return Occurrence(Axis.PROPERTY, prop.name, Location.of_node(prop))
    value = _string_literal(prop)
    if value is not None:
        return Occurrence(Axis.PROPERTY, value, Location.of_node(prop))
    return None


def object_key(prop: Any) -> Optional[Occurrence]:
    """The property occurrence of an object literal entry, if it has a static key."""
    key = getattr(prop, "key", None)
    if key is None or getattr(prop, "computed", False):
        return None
    if key.type == "Identifier":
        return Occurrence(Axis.PROPERTY, key.name, Location.of_node(key))
    value = _string_literal(key)
    if value is not None:
        return Occurrence(Axis.PROPERTY, value, Location.of_node(key))
    return None


def iter_occurrences(file) -> Iterator[Occurrence]:
    """
    Yield every significant name in *file*.

    Identifiers come first, then assigned member properties, then object
    literal keys; each group is in document order.
    """
    count = 0

    for node in file.iterate_nodes_by_type("Identifier"):
        if is_significant_identifier(node, file.parent_of(node)):
            count += 1
            yield Occurrence(Axis.IDENTIFIER, node.name, Location.of_node(node))

    for node in file.iterate_nodes_by_type("MemberExpression"):
        parent = file.parent_of(node)
        if parent is None or not _is_plain_assignment_target(node, parent):
            continue
        occurrence = member_property(node)
        if occurrence is not None:
            count += 1
            yield occurrence

    for node in file.iterate_nodes_by_type("ObjectExpression"):
        for prop in node.properties or ():
            occurrence = object_key(prop)
            if occurrence is not None:
                count += 1
                yield occurrence

    logger.debug("%s: %d significant names", getattr(file, "filename", "<unknown>"), count)
