# --- Syntax error reporting ---------------------------------------------------
from dataclasses import dataclass

from tree_sitter import Node

from decl_index.src.decl_index.errors import JavaSyntaxError
from decl_index.src.decl_index.tree_sitter_helpers import node_point, node_text


@dataclass(frozen=True)
class SyntaxIssue:
    line: int  # 0-based, like tree-sitter points
    col: int
    message: str

    def __str__(self) -> str:
        return f"line {self.line + 1}:{self.col + 1} {self.message}"


class ErrorListener:
    """
    Receives syntax errors found in a parsed tree. Subclass and override
    `syntax_error` to plug in other behaviour.
    """

    def syntax_error(self, line: int, col: int, message: str) -> None:
        raise NotImplementedError


class CollectingErrorListener(ErrorListener):
    """Records every issue so the caller can decide what to do with them."""

    def __init__(self):
        self.issues: list[SyntaxIssue] = []

    def syntax_error(self, line: int, col: int, message: str) -> None:
        self.issues.append(SyntaxIssue(line, col, message))


class RaisingErrorListener(ErrorListener):
    """Stops at the first issue by raising JavaSyntaxError."""

    def syntax_error(self, line: int, col: int, message: str) -> None:
        raise JavaSyntaxError([SyntaxIssue(line, col, message)])


def report_syntax_errors(source_bytes: bytes, root: Node, listener: ErrorListener) -> list[SyntaxIssue]:
    """
    Walks the tree and reports ERROR and MISSING nodes to `listener`, in
    document order. Subtrees without errors are skipped. Returns every issue
    found, whatever the listener does with them.
    """
    issues: list[SyntaxIssue] = []
    if not root.has_error:
        return issues
    stack = [root]
    while stack:
        node = stack.pop()
        line, col = node_point(node)
        if node.is_missing:
            message = f"missing '{node.type}'"
        elif node.type == "ERROR":
            snippet = node_text(source_bytes, node).strip().splitlines()
            near = snippet[0][:40] if snippet else ""
            message = f"unexpected input near '{near}'"
        else:
            # Reverse so that popping visits children left to right
            stack.extend(child for child in reversed(node.children) if child.has_error)
            continue
        issues.append(SyntaxIssue(line, col, message))
        listener.syntax_error(line, col, message)
    return issues
