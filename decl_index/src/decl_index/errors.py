class DeclIndexError(Exception):
    """Base class for errors raised while building the declaration index."""


class GrammarLoadError(DeclIndexError):
    """The tree-sitter grammar for a language could not be loaded."""


class JavaSyntaxError(DeclIndexError):
    """The parser could not produce a clean tree for a file."""

    def __init__(self, issues):
        self.issues = tuple(issues)
        first = self.issues[0] if self.issues else None
        detail = f": {first}" if first is not None else ""
        super().__init__(f"{len(self.issues)} syntax error(s){detail}")


class ExtractionError(DeclIndexError):
    """A declaration node lacks a sub-node the extractor cannot do without."""

    def __init__(self, node_type: str, line: int, col: int, what: str):
        self.node_type = node_type
        self.line = line
        self.col = col
        super().__init__(f"{node_type} at {line + 1}:{col + 1} has no {what}")
