from enum import Enum


class Modifier(Enum):
    """Access and declaration modifiers a declaration record can carry."""
    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"
    STATIC = "static"
    FINAL = "final"
    ABSTRACT = "abstract"
    STRICT = "strict"


def modifier_names(modifiers) -> list[str]:
    """Stable, declaration-order-independent listing of a modifier set."""
    order = list(Modifier)
    return [m.value for m in sorted(modifiers, key=order.index)]
