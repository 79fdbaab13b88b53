import json
from typing import Mapping

from decl_index.src.decl_index.models.ast_models import (
    ClassInfo,
    ExtractionResult,
    FieldInfo,
    MethodInfo,
)
from decl_index.src.decl_index.models.modifiers import modifier_names


# --- Pretty printing & JSON export ------------------------------------------

def print_summary(results: Mapping[str, ExtractionResult]):
    """
    Human-friendly printout of what we found: each class, one line per
    member, nested classes after their parent.
    """
    for path, result in results.items():
        print(f"\n=== {path} ===")
        if not result.ok:
            print(f"  !! {result.status.value}: {result.message}")
            continue
        for class_info in result.declarations:
            print_class(class_info)


def print_class(class_info: ClassInfo, indent: int = 0):
    pad = "  " * indent
    print(f"{pad}{class_info.class_name.short_name}")
    for child in class_info.children:
        if isinstance(child, MethodInfo):
            print(f"{pad}-{child.method_name.signature}")
        elif isinstance(child, FieldInfo):
            print(f"{pad}-{child.name}: {child.field_name.type_signature}")
        else:
            print(f"{pad}-{child.class_name.short_name}")
    for inner in class_info.inner_classes:
        print_class(inner, indent + 1)


def _class_to_dict(ci: ClassInfo) -> dict:
    return {
        "qualifiedName": ci.class_name.qualified_name,
        "shortName": ci.class_name.short_name,
        "package": ci.class_name.package.name,
        "file": ci.class_name.file.path,
        "modifiers": modifier_names(ci.modifiers),
        "header": ci.header.text,
        "synthetic": ci.is_synthetic,
        "methods": [
            {
                "name": mi.name,
                "signature": mi.method_name.signature,
                "modifiers": modifier_names(mi.modifiers),
                "arguments": [{"name": a.name, "type": a.type.signature} for a in mi.arguments],
                "returnType": mi.return_type.signature,
                "source": mi.snippet.text,
            }
            for mi in ci.methods
        ],
        "fields": [
            {
                "name": fi.name,
                "type": fi.field_name.type_signature,
                "modifiers": modifier_names(fi.modifiers),
                "source": fi.snippet.text,
            }
            for fi in ci.fields
        ],
        "innerClasses": [_class_to_dict(inner) for inner in ci.inner_classes],
    }


def to_json(results: Mapping[str, ExtractionResult]) -> str:
    """
    Serializes the extracted declarations to JSON.
    """
    out = {"files": []}
    for path, result in results.items():
        out["files"].append({
            "path": path,
            "status": result.status.value,
            "message": result.message,
            "issues": [str(issue) for issue in result.issues],
            "classes": [_class_to_dict(ci) for ci in result.declarations],
        })
    return json.dumps(out, indent=2)
