# --- Compilation unit entry point ----------------------------------------------
from typing import Optional

from tree_sitter import Node

from decl_index.src.decl_index.extraction.type_declarations import (
    TYPE_DECLARATION_NODES,
    TopLevel,
    extract_type_declaration,
)
from decl_index.src.decl_index.models.ast_models import ClassInfo
from decl_index.src.decl_index.models.names import FileName, PackageName
from decl_index.src.decl_index.tree_sitter_helpers import compact_text, first_child_of_type


def find_package(source_bytes: bytes, root: Node) -> Optional[str]:
    """
    Grabs the package name from a 'package_declaration' node if present.
    """
    declaration = first_child_of_type(root, "package_declaration")
    if declaration is None:
        return None
    name_node = first_child_of_type(declaration, "scoped_identifier", "identifier")
    return compact_text(source_bytes, name_node) if name_node else None


def extract_compilation_unit(source_bytes: bytes, root: Node, file_name: FileName,
                             package_name: str = "") -> list[ClassInfo]:
    """
    Extracts every top-level type of a compilation unit, in declaration order.
    A package declaration in the source wins over `package_name`.
    """
    package = PackageName(find_package(source_bytes, root) or package_name)
    context = TopLevel(file_name=file_name, package_name=package)

    outer_classes = []
    for child in root.named_children:
        if child.type not in TYPE_DECLARATION_NODES:
            continue
        class_info = extract_type_declaration(source_bytes, child, context)
        if class_info is not None:
            outer_classes.append(class_info)
    return outer_classes
