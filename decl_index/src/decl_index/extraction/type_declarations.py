# --- Type declaration extraction ------------------------------------------------
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from tree_sitter import Node

from decl_index.src.decl_index.extraction.members import (
    FIELD_NODES,
    METHOD_NODES,
    extract_enum_constant,
    extract_fields,
    extract_method,
)
from decl_index.src.decl_index.extraction.modifier_resolver import declaration_modifiers
from decl_index.src.decl_index.log_setup import get_logger
from decl_index.src.decl_index.models.ast_models import ClassInfo, Declaration, SourceCodeSnippet
from decl_index.src.decl_index.models.modifiers import Modifier
from decl_index.src.decl_index.models.names import ClassName, FileName, PackageName
from decl_index.src.decl_index.tree_sitter_helpers import node_text, required_field, text_before_brace

logger = get_logger("type_declarations")

# Records are extracted like classes; annotation types are recognized and dropped.
TYPE_DECLARATION_NODES = frozenset({
    "class_declaration",
    "interface_declaration",
    "enum_declaration",
    "record_declaration",
    "annotation_type_declaration",
})

# Nested types are recorded as private whatever their written modifiers.
NESTED_TYPE_MODIFIERS = frozenset({Modifier.PRIVATE})


@dataclass(frozen=True)
class TopLevel:
    """A type declared directly in a compilation unit."""
    file_name: FileName
    package_name: PackageName


@dataclass(frozen=True)
class Nested:
    """A type declared inside the body of `parent`."""
    parent: ClassName


DeclarationContext = Union[TopLevel, Nested]


def extract_type_declaration(source_bytes: bytes, node: Node,
                             context: DeclarationContext) -> Optional[ClassInfo]:
    """
    Turns a class, interface, enum or record declaration into a ClassInfo
    with all of its members and nested types attached. Returns None for
    annotation type declarations.
    """
    if node.type == "annotation_type_declaration":
        _discard_annotation_type(source_bytes, node)
        return None

    name = node_text(source_bytes, required_field(node, "name"))
    if isinstance(context, Nested):
        class_name = context.parent.nested(name)
        modifiers = NESTED_TYPE_MODIFIERS
    else:
        class_name = ClassName(file=context.file_name, package=context.package_name, name=name)
        modifiers = declaration_modifiers(node)

    body = node.child_by_field_name("body")
    # Enums carry no header text
    header = "" if node.type == "enum_declaration" else text_before_brace(source_bytes, node)

    children = tuple(_walk_body(source_bytes, body, class_name))
    logger.debug("extracted %s (%s) with %d member(s)", class_name.qualified_name, node.type, len(children))
    return ClassInfo(
        class_name=class_name,
        modifiers=modifiers,
        header=SourceCodeSnippet(header),
        children=children,
    )


def _walk_body(source_bytes: bytes, body: Optional[Node], owner: ClassName) -> Iterator[Declaration]:
    """
    Yields the declaration records for each member of a class, interface or
    enum body, in source order. Initializer blocks and anything else without
    a member extractor are passed over. Enum constants come back as FieldInfo
    records synthesized from the constants themselves, typed as the enum;
    they have no field declaration behind them.
    """
    if body is None:
        return
    for child in body.named_children:
        if child.type in METHOD_NODES:
            yield extract_method(source_bytes, child, owner)
        elif child.type in FIELD_NODES:
            yield from extract_fields(source_bytes, child, owner)
        elif child.type == "enum_constant":
            yield extract_enum_constant(source_bytes, child, owner)
        elif child.type == "enum_body_declarations":
            # The part of an enum body after the constants reads like a class body
            yield from _walk_body(source_bytes, child, owner)
        elif child.type in TYPE_DECLARATION_NODES:
            nested = extract_type_declaration(source_bytes, child, Nested(parent=owner))
            if nested is not None:
                yield nested


def _discard_annotation_type(source_bytes: bytes, node: Node) -> None:
    name_node = node.child_by_field_name("name")
    body = node.child_by_field_name("body")
    name = node_text(source_bytes, name_node) if name_node else "<anonymous>"
    body_size = len(node_text(source_bytes, body)) if body else 0
    logger.debug("skipping annotation type @%s (%d chars of body)", name, body_size)
