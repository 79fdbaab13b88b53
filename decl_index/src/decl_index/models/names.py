# --- Qualified names ---------------------------------------------------------
from dataclasses import dataclass
from typing import Optional

# Joins a nested type's name onto its parent's, e.g. "Outer$Inner".
NESTED_DELIMITER = "$"


@dataclass(frozen=True)
class FileName:
    """Identity of the file a declaration came from."""
    path: str

    def __str__(self) -> str:
        return self.path


@dataclass(frozen=True)
class PackageName:
    """Package (namespace) a declaration lives in; empty for the default package."""
    name: str = ""

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ClassName:
    """
    Qualified name of a type declaration. For nested types `name` is the
    syntactic identifier and `parent` the enclosing type's ClassName.
    """
    file: FileName
    package: PackageName
    name: str
    parent: Optional["ClassName"] = None

    @property
    def short_name(self) -> str:
        """Display name; nested types are joined onto their parents, e.g. "Outer$Inner"."""
        if self.parent is None:
            return self.name
        return f"{self.parent.short_name}{NESTED_DELIMITER}{self.name}"

    @property
    def qualified_name(self) -> str:
        """package/file#Outer$Inner (file#Outer$Inner for the default package)."""
        prefix = f"{self.package.name}/" if self.package.name else ""
        return f"{prefix}{self.file.path}#{self.short_name}"

    def nested(self, name: str) -> "ClassName":
        """ClassName for a type declared directly inside this one."""
        return ClassName(file=self.file, package=self.package, name=name, parent=self)

    def __str__(self) -> str:
        return self.qualified_name


@dataclass(frozen=True)
class MethodName:
    """
    Identity of a method. All four fields take part in equality, which makes
    this the overload key; parameter names are deliberately absent.
    """
    owner: ClassName
    name: str
    return_signature: str
    parameter_signatures: tuple[str, ...] = ()

    @property
    def signature(self) -> str:
        return f"{self.name}({','.join(self.parameter_signatures)}):{self.return_signature}"

    def __str__(self) -> str:
        return f"{self.owner.qualified_name}.{self.signature}"


@dataclass(frozen=True)
class FieldName:
    owner: ClassName
    name: str
    type_signature: str

    def __str__(self) -> str:
        return f"{self.owner.qualified_name}.{self.name}:{self.type_signature}"
