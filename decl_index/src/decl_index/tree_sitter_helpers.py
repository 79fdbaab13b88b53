# --- Tree-sitter plumbing ----------------------------------------------------
from typing import Iterable, Optional

from tree_sitter import Node

from decl_index.src.decl_index.errors import ExtractionError


def node_text(source_bytes: bytes, node) -> str:
    """
    Converts a node's [start_byte:end_byte] into the corresponding string.
    Tree-sitter nodes only store byte offsets, so we slice the source bytes.
    """
    return source_bytes[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def node_point(node) -> tuple[int, int]:
    """
    Returns the (line, column) of a node's start in 0-based coordinates.
    """
    return (node.start_point[0], node.start_point[1])


def compact_text(source_bytes: bytes, node) -> str:
    """Node text with all whitespace removed, e.g. for `java.util . List`."""
    return "".join(node_text(source_bytes, node).split())


def children_of_type(node: Node, *types: str) -> Iterable[Node]:
    return (child for child in node.named_children if child.type in types)


def first_child_of_type(node: Node, *types: str) -> Optional[Node]:
    return next(iter(children_of_type(node, *types)), None)


def required_field(node: Node, field_name: str) -> Node:
    """child_by_field_name that raises ExtractionError when the child is absent."""
    child = node.child_by_field_name(field_name)
    if child is None:
        line, col = node_point(node)
        raise ExtractionError(node.type, line, col, field_name)
    return child


def text_before_brace(source_bytes: bytes, node: Node) -> str:
    """Source text of `node` up to (not including) its first `{`; all of it if there is none."""
    text = node_text(source_bytes, node)
    brace = text.find("{")
    return text if brace < 0 else text[:brace]
