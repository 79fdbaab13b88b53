# --- Declaration records ------------------------------------------------------
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from decl_index.src.decl_index.models.modifiers import Modifier
from decl_index.src.decl_index.models.names import ClassName, FieldName, FileName, MethodName
from decl_index.src.decl_index.models.type_names import TypeName
from decl_index.src.decl_index.syntax_errors import SyntaxIssue


class SourceCodeLanguage(Enum):
    JAVA = "java"
    KOTLIN = "kotlin"
    CSHARP = "csharp"
    C = "c"
    CPP = "cpp"
    OBJECTIVE_C = "objc"
    PYTHON = "python"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    SOLIDITY = "solidity"


@dataclass(frozen=True)
class SourceCodeSnippet:
    """A piece of raw source text tagged with its language."""
    text: str
    language: SourceCodeLanguage = SourceCodeLanguage.JAVA


@dataclass(frozen=True)
class Argument:
    """One formal parameter: declared name plus resolved type."""
    name: str
    type: TypeName


@dataclass(frozen=True)
class MethodInfo:
    """A method, constructor or interface method declared in a class."""
    method_name: MethodName
    modifiers: frozenset[Modifier]
    owner: ClassName
    arguments: tuple[Argument, ...]
    return_type: TypeName
    snippet: SourceCodeSnippet

    @property
    def name(self) -> str:
        return self.method_name.name


@dataclass(frozen=True)
class FieldInfo:
    """A single field; `int a, b;` yields two of these sharing a snippet."""
    field_name: FieldName
    owner: ClassName
    modifiers: frozenset[Modifier]
    snippet: SourceCodeSnippet

    @property
    def name(self) -> str:
        return self.field_name.name


@dataclass(frozen=True)
class ClassInfo:
    """
    A class, interface or enum and everything declared directly in it.

    `children` keeps methods, fields and nested types in source order; the
    typed views below filter it without reordering. A ClassInfo owns its
    children outright: nested types hold no reference back to their parent
    beyond the parent's ClassName inside their own name.
    """
    class_name: ClassName
    modifiers: frozenset[Modifier]
    header: SourceCodeSnippet
    children: tuple["Declaration", ...] = ()
    is_synthetic: bool = False

    @property
    def methods(self) -> tuple[MethodInfo, ...]:
        return tuple(c for c in self.children if isinstance(c, MethodInfo))

    @property
    def fields(self) -> tuple[FieldInfo, ...]:
        return tuple(c for c in self.children if isinstance(c, FieldInfo))

    @property
    def inner_classes(self) -> tuple["ClassInfo", ...]:
        return tuple(c for c in self.children if isinstance(c, ClassInfo))

    def walk(self):
        """Yields this class and every nested class, depth-first in source order."""
        yield self
        for inner in self.inner_classes:
            yield from inner.walk()


Declaration = Union[ClassInfo, MethodInfo, FieldInfo]


class ExtractionStatus(Enum):
    PARSED = "parsed"
    SYNTAX_ERROR = "syntax_error"
    EXTRACTION_ERROR = "extraction_error"


@dataclass(frozen=True)
class ExtractionResult:
    """
    Outcome of extracting one file. A file that parsed but declares nothing
    and a file that failed to parse both have no declarations; `status`
    tells them apart.
    """
    file_name: FileName
    status: ExtractionStatus
    declarations: tuple[ClassInfo, ...] = ()
    issues: tuple[SyntaxIssue, ...] = ()
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is ExtractionStatus.PARSED

    @classmethod
    def parsed(cls, file_name: FileName, declarations) -> "ExtractionResult":
        return cls(file_name=file_name, status=ExtractionStatus.PARSED,
                   declarations=tuple(declarations))

    @classmethod
    def failed(cls, file_name: FileName, status: ExtractionStatus, message: str,
               issues=()) -> "ExtractionResult":
        return cls(file_name=file_name, status=status, issues=tuple(issues), message=message)
