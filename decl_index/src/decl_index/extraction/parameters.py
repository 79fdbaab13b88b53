# --- Parameters, declarators and throws clauses --------------------------------
from typing import Optional

from tree_sitter import Node

from decl_index.src.decl_index.extraction.type_resolver import find_type_child, resolve_type_name
from decl_index.src.decl_index.models.ast_models import Argument
from decl_index.src.decl_index.tree_sitter_helpers import (
    compact_text,
    first_child_of_type,
    node_text,
    required_field,
)


def extract_arguments(source_bytes: bytes, parameters: Optional[Node]) -> tuple[Argument, ...]:
    """
    Resolves a `formal_parameters` node into Arguments, in declaration order.
    Receiver parameters (`Foo this`) are not arguments and are skipped.
    """
    if parameters is None:
        return ()
    arguments = []
    for child in parameters.named_children:
        if child.type == "formal_parameter":
            arguments.append(extract_formal_parameter(source_bytes, child))
        elif child.type == "spread_parameter":
            arguments.append(extract_spread_parameter(source_bytes, child))
    return tuple(arguments)


def extract_formal_parameter(source_bytes: bytes, parameter: Node) -> Argument:
    # `int a[]` keeps its dimensions in a sibling field, so `name` is already bare
    type_name = resolve_type_name(source_bytes, parameter.child_by_field_name("type"))
    name = node_text(source_bytes, required_field(parameter, "name"))
    return Argument(name=name, type=type_name)


def extract_spread_parameter(source_bytes: bytes, parameter: Node) -> Argument:
    """Varargs `String... names` resolves to the element type and the bare name."""
    type_name = resolve_type_name(source_bytes, find_type_child(parameter))
    declarator = first_child_of_type(parameter, "variable_declarator")
    if declarator is None:
        return Argument(name="", type=type_name)
    name = node_text(source_bytes, required_field(declarator, "name"))
    return Argument(name=name, type=type_name)


def declarator_names(source_bytes: bytes, declaration: Node) -> list[str]:
    """Identifiers declared by a field or constant: `int a, b[] = {};` -> ["a", "b"]."""
    return [
        node_text(source_bytes, required_field(declarator, "name"))
        for declarator in declaration.children_by_field_name("declarator")
    ]


def exception_names(source_bytes: bytes, declaration: Node) -> list[str]:
    """Types listed in a method's throws clause; empty when there is none."""
    throws = first_child_of_type(declaration, "throws")
    if throws is None:
        return []
    return [compact_text(source_bytes, child) for child in throws.named_children]
