from typing import Optional

from tree_sitter import Node

from decl_index.src.decl_index.models.modifiers import Modifier
from decl_index.src.decl_index.tree_sitter_helpers import first_child_of_type

_MODIFIERS_BY_KEYWORD = {
    "public": Modifier.PUBLIC,
    "private": Modifier.PRIVATE,
    "protected": Modifier.PROTECTED,
    "static": Modifier.STATIC,
    "final": Modifier.FINAL,
    "abstract": Modifier.ABSTRACT,
    "strictfp": Modifier.STRICT,
}


def resolve_modifiers(modifiers_node: Optional[Node]) -> frozenset[Modifier]:
    """
    Union of the flags named by the keywords under a `modifiers` node.
    Annotations and keywords without a flag (default, sealed, ...) add nothing.
    """
    if modifiers_node is None:
        return frozenset()
    # Keywords are anonymous children whose type is the keyword itself
    return frozenset(
        _MODIFIERS_BY_KEYWORD[child.type]
        for child in modifiers_node.children
        if child.type in _MODIFIERS_BY_KEYWORD
    )


def declaration_modifiers(declaration: Node) -> frozenset[Modifier]:
    """Modifiers written on a declaration node (class, method, field...)."""
    return resolve_modifiers(first_child_of_type(declaration, "modifiers"))
