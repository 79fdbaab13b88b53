# --- Type name resolution -----------------------------------------------------
from typing import Optional

from tree_sitter import Node

from decl_index.src.decl_index.models.type_names import TypeName, primitive_for_keyword
from decl_index.src.decl_index.tree_sitter_helpers import compact_text, node_text

PRIMITIVE_TYPE_NODES = frozenset({"integral_type", "floating_point_type", "boolean_type", "void_type"})

# Every node kind that can stand in a type position
TYPE_NODES = PRIMITIVE_TYPE_NODES | {
    "type_identifier",
    "scoped_type_identifier",
    "generic_type",
    "array_type",
    "annotated_type",
}


def resolve_type_name(source_bytes: bytes, node: Optional[Node]) -> TypeName:
    """
    Canonicalizes a type-reference node into a TypeName.

    Type arguments are folded into the identifier (`Map<String,Integer>`);
    no nested argument list is kept. Array dimensions and annotations are
    dropped. Anything absent or unrecognized resolves to void.
    """
    if node is None:
        return TypeName.void()

    kind = node.type
    if kind in PRIMITIVE_TYPE_NODES:
        primitive = primitive_for_keyword(node_text(source_bytes, node))
        return TypeName.of_primitive(primitive) if primitive else TypeName.void()
    if kind in ("type_identifier", "scoped_type_identifier", "generic_type"):
        return TypeName.reference(reference_identifier(source_bytes, node))
    if kind == "array_type":
        return resolve_type_name(source_bytes, node.child_by_field_name("element"))
    if kind == "annotated_type":
        return resolve_type_name(source_bytes, find_type_child(node))
    return TypeName.void()


def find_type_child(node: Node) -> Optional[Node]:
    """The first named child of `node` sitting in a type position, if any."""
    for child in node.named_children:
        if child.type in TYPE_NODES:
            return child
    return None


def reference_identifier(source_bytes: bytes, node: Node) -> str:
    """Identifier text for a reference type, with type arguments folded in."""
    if node.type != "generic_type":
        return compact_text(source_bytes, node)

    base = ""
    arguments: list[str] = []
    for child in node.named_children:
        if child.type in ("type_identifier", "scoped_type_identifier"):
            base = compact_text(source_bytes, child)
        elif child.type == "type_arguments":
            arguments = type_argument_identifiers(source_bytes, child)
    if not arguments:
        # Diamond (`new ArrayList<>()`) or raw usage
        return base
    return f"{base}<{','.join(arguments)}>"


def type_argument_identifiers(source_bytes: bytes, type_arguments: Node) -> list[str]:
    identifiers = []
    for child in type_arguments.named_children:
        if child.type == "wildcard":
            identifiers.append(_wildcard_identifier(source_bytes, child))
        elif child.type in TYPE_NODES:
            identifiers.append(resolve_type_name(source_bytes, child).signature)
    return identifiers


def _wildcard_identifier(source_bytes: bytes, wildcard: Node) -> str:
    bound_kind = None
    for child in wildcard.children:
        if child.type in ("extends", "super"):
            bound_kind = child.type
    bound = find_type_child(wildcard)
    if bound is None or bound_kind is None:
        return "?"
    return f"? {bound_kind} {resolve_type_name(source_bytes, bound).signature}"
