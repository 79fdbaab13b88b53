# --- Type names --------------------------------------------------------------
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PrimitiveType(Enum):
    """The fixed set of primitive types a TypeName can carry."""
    VOID = "void"
    INT = "int"
    BYTE = "byte"
    CHAR = "char"
    LONG = "long"
    FLOAT = "float"
    SHORT = "short"
    DOUBLE = "double"
    BOOL = "bool"


# Java spells it "boolean"; the model spells it "bool".
_KEYWORD_ALIASES = {"boolean": "bool"}

_PRIMITIVES_BY_KEYWORD = {p.value: p for p in PrimitiveType}


def primitive_for_keyword(keyword: str) -> Optional[PrimitiveType]:
    """Maps a primitive keyword to its PrimitiveType, or None if it isn't one."""
    keyword = keyword.strip()
    return _PRIMITIVES_BY_KEYWORD.get(_KEYWORD_ALIASES.get(keyword, keyword))


@dataclass(frozen=True)
class TypeName:
    """
    A resolved type: either a primitive or a reference type named by its
    (possibly simplified) identifier.
    """
    identifier: str  # e.g. "int", "String", "java.util.List", "Map<String,Integer>"
    primitive: Optional[PrimitiveType] = None

    @property
    def is_primitive(self) -> bool:
        return self.primitive is not None

    @property
    def is_void(self) -> bool:
        return self.primitive is PrimitiveType.VOID

    @property
    def signature(self) -> str:
        if self.primitive is not None:
            return self.primitive.value
        return self.identifier

    @classmethod
    def of_primitive(cls, primitive: PrimitiveType) -> "TypeName":
        return cls(identifier=primitive.value, primitive=primitive)

    @classmethod
    def void(cls) -> "TypeName":
        return cls.of_primitive(PrimitiveType.VOID)

    @classmethod
    def reference(cls, identifier: str) -> "TypeName":
        return cls(identifier=identifier)

    @classmethod
    def for_name(cls, name: str) -> "TypeName":
        """Primitive when `name` is a primitive keyword, a reference type otherwise."""
        primitive = primitive_for_keyword(name)
        if primitive is not None:
            return cls.of_primitive(primitive)
        if not name.strip():
            return cls.void()
        return cls.reference(name.strip())

    def __str__(self) -> str:
        return self.signature
