"""Which files the indexer looks at, and how."""

import os
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Mapping

from decl_index.src.decl_index.models.ast_models import SourceCodeLanguage


class FileKind(Enum):
    EXTRACTABLE = "extractable"  # source with an extractor
    NOT_IMPLEMENTED = "not_implemented"  # source we recognize but cannot extract yet
    NON_SOURCE = "non_source"  # data, documents, binaries
    UNKNOWN = "unknown"


# see: https://github.com/dyne/file-extension-list
DEFAULT_EXTRACTABLE = {".java": SourceCodeLanguage.JAVA}

DEFAULT_PENDING = frozenset({
    ".cs", ".h", ".hxx", ".hpp", ".cpp", ".c", ".cc", ".m", ".py", ".py3",
    ".js", ".jsx", ".kt", ".sol", ".ts",
    # to be parsed in the future
    ".sc", ".rs", ".go", ".clj", ".cxx", ".el", ".lua", ".m4", ".php", ".pl",
    ".rb", ".sh", ".swift", ".vb",
})

DEFAULT_NON_SOURCE = frozenset({
    ".txt", ".md", ".html", ".json", ".xml", ".sql", ".yaml", ".hbs", ".vcxproj",
    ".xcodeproj", ".csproj", ".diff", ".patch", ".log", ".rtf", ".tex", ".odt",
    ".org", ".pdf", ".rst", ".wpd", ".wps", ".po",
    # libraries and binaries
    ".class", ".jar", ".war", ".ear", ".dll", ".exe", ".so", ".lib", ".a",
})


@dataclass(frozen=True)
class ScanConfig:
    """Extension dispatch table plus scan-wide defaults. Build once and pass it around."""
    extractable: Mapping[str, SourceCodeLanguage] = field(
        default_factory=lambda: dict(DEFAULT_EXTRACTABLE))
    pending: frozenset[str] = DEFAULT_PENDING
    non_source: frozenset[str] = DEFAULT_NON_SOURCE
    default_package: str = ""

    def classify(self, path: str) -> FileKind:
        ext = os.path.splitext(path)[1].lower()
        if ext in self.extractable:
            return FileKind.EXTRACTABLE
        if ext in self.pending:
            return FileKind.NOT_IMPLEMENTED
        if ext in self.non_source:
            return FileKind.NON_SOURCE
        return FileKind.UNKNOWN

    def with_overrides(self, **changes) -> "ScanConfig":
        return replace(self, **changes)


def default_config(default_package: str = "") -> ScanConfig:
    return ScanConfig(default_package=default_package)
