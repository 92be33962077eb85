"""
Extraction of computed bracketed regions from a parsed document.

Two node categories are inspected:
  member access:       `obj[key]`, `obj?.[key]`
  property definition: `{ [key]: v }`, `{ [key]() {} }`, `const { [key]: v } = o`
Dot access and literal/identifier keys are not computed and yield nothing.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Tuple

from tree_sitter import Node

from ..tokens import BracketedRegion, RegionKind
from .tree_sitter_support import TreeSitterDocument

logger = logging.getLogger(__name__)

# Parents for which a computed_property_name is the key of an object property
_PROPERTY_PARENTS = {"pair", "pair_pattern"}


def _bracket(node: Node, kind: str) -> Optional[Node]:
    for child in node.children:
        if child.type == kind and not child.is_missing:
            return child
    return None


def _inner_expression(node: Node) -> Optional[Node]:
    """Expression between the brackets of a computed_property_name."""
    for child in node.named_children:
        if child.type != "comment":
            return child
    return None


def _unwrap_parens(inner: Node, open_br: Node, close_br: Node) -> Optional[Tuple[Node, Node, Node]]:
    """
    Descend through parenthesized_expression wrappers.

    Parentheses are not part of the inner expression, so the innermost
    "(" and ")" become the tokens before and after it.
    """
    while inner.type == "parenthesized_expression":
        lp = _bracket(inner, "(")
        rp = _bracket(inner, ")")
        wrapped = _inner_expression(inner)
        if lp is None or rp is None or wrapped is None:
            return None
        inner, open_br, close_br = wrapped, lp, rp
    return inner, open_br, close_br


def _property_owner(node: Node) -> Optional[Node]:
    """The property definition owning a computed_property_name, if it is one."""
    parent = node.parent
    if parent is None:
        return None
    if parent.type in _PROPERTY_PARENTS:
        return parent
    if parent.type == "method_definition" and parent.parent is not None and parent.parent.type == "object":
        return parent
    return None


def _make_region(
        doc: TreeSitterDocument,
        kind: RegionKind,
        owner: Node,
        container: Node,
        inner: Optional[Node],
) -> Optional[BracketedRegion]:
    open_br = _bracket(container, "[")
    close_br = _bracket(container, "]")
    if open_br is None or close_br is None or inner is None:
        return None

    unwrapped = _unwrap_parens(inner, open_br, close_br)
    if unwrapped is None:
        return None
    inner, open_br, close_br = unwrapped

    first = doc.first_leaf(inner)
    last = doc.last_leaf(inner)
    if inner.is_missing or first.is_missing or last.is_missing:
        return None

    return BracketedRegion(
        kind=kind,
        node=doc.node_start(owner),
        before=doc.make_token(open_br),
        first=doc.make_token(first),
        last=doc.make_token(last),
        after=doc.make_token(close_br),
    )


def iter_regions(doc: TreeSitterDocument) -> Iterator[BracketedRegion]:
    """
    Yield one region per computed access, in document order.

    Args:
        doc: Parsed document

    Yields:
        BracketedRegion for every well-formed computed member access
        and computed property key
    """
    for node in doc.walk_tree():
        region: Optional[BracketedRegion] = None

        if node.type == "subscript_expression":
            region = _make_region(doc, "member", node, node, node.child_by_field_name("index"))
        elif node.type == "computed_property_name":
            owner = _property_owner(node)
            if owner is None:
                continue
            region = _make_region(doc, "property", owner, node, _inner_expression(node))
        else:
            continue

        if region is None:
            row, col = node.start_point
            logger.debug("skipping incomplete %s at %d:%d", node.type, row + 1, col + 1)
            continue
        yield region


__all__ = ["iter_regions"]
