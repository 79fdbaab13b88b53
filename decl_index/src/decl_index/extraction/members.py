# --- Member extraction ----------------------------------------------------------
from tree_sitter import Node

from decl_index.src.decl_index.extraction.parameters import (
    declarator_names,
    exception_names,
    extract_arguments,
)
from decl_index.src.decl_index.extraction.type_resolver import resolve_type_name
from decl_index.src.decl_index.log_setup import get_logger
from decl_index.src.decl_index.models.ast_models import FieldInfo, MethodInfo, SourceCodeSnippet
from decl_index.src.decl_index.models.modifiers import Modifier
from decl_index.src.decl_index.models.names import ClassName, FieldName, MethodName
from decl_index.src.decl_index.models.type_names import TypeName
from decl_index.src.decl_index.tree_sitter_helpers import node_text, required_field

logger = get_logger("members")

METHOD_NODES = frozenset({"method_declaration", "constructor_declaration"})
FIELD_NODES = frozenset({"field_declaration", "constant_declaration"})

# Member access modifiers are not read from source yet; every member is public.
MEMBER_MODIFIERS = frozenset({Modifier.PUBLIC})


def extract_method(source_bytes: bytes, node: Node, owner: ClassName) -> MethodInfo:
    """
    Builds a MethodInfo from a method, constructor or interface method.
    Constructors have no return type and resolve to void.
    """
    name = node_text(source_bytes, required_field(node, "name"))
    arguments = extract_arguments(source_bytes, node.child_by_field_name("parameters"))

    return_type = TypeName.void()
    if node.type == "method_declaration":
        return_type = resolve_type_name(source_bytes, node.child_by_field_name("type"))

    # Parsed for completeness; the model has nowhere to keep them yet.
    thrown = exception_names(source_bytes, node)
    if thrown:
        logger.debug("%s.%s throws %s (not recorded)", owner.short_name, name, ", ".join(thrown))

    method_name = MethodName(
        owner=owner,
        name=name,
        return_signature=return_type.signature,
        parameter_signatures=tuple(arg.type.signature for arg in arguments),
    )
    return MethodInfo(
        method_name=method_name,
        modifiers=MEMBER_MODIFIERS,
        owner=owner,
        arguments=arguments,
        return_type=return_type,
        snippet=SourceCodeSnippet(node_text(source_bytes, node)),
    )


def extract_fields(source_bytes: bytes, node: Node, owner: ClassName) -> list[FieldInfo]:
    """
    One FieldInfo per declarator of a field (or interface constant)
    declaration. The type is resolved once and shared, as is the snippet.
    """
    field_type = resolve_type_name(source_bytes, node.child_by_field_name("type"))
    snippet = SourceCodeSnippet(node_text(source_bytes, node))
    return [
        FieldInfo(
            field_name=FieldName(owner=owner, name=name, type_signature=field_type.signature),
            owner=owner,
            modifiers=MEMBER_MODIFIERS,
            snippet=snippet,
        )
        for name in declarator_names(source_bytes, node)
    ]


def extract_enum_constant(source_bytes: bytes, node: Node, owner: ClassName) -> FieldInfo:
    """An enum constant is a field whose type is the enum itself."""
    name = node_text(source_bytes, required_field(node, "name"))
    return FieldInfo(
        field_name=FieldName(owner=owner, name=name, type_signature=owner.short_name),
        owner=owner,
        modifiers=MEMBER_MODIFIERS,
        snippet=SourceCodeSnippet(node_text(source_bytes, node)),
    )
