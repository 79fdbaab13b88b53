from typing import Callable

from tree_sitter import Language, Node, Parser, Tree

from decl_index.src.decl_index.errors import ExtractionError, GrammarLoadError, JavaSyntaxError
from decl_index.src.decl_index.extraction.driver import extract_compilation_unit
from decl_index.src.decl_index.log_setup import get_logger
from decl_index.src.decl_index.models.ast_models import ExtractionResult, ExtractionStatus
from decl_index.src.decl_index.models.names import FileName
from decl_index.src.decl_index.syntax_errors import (
    CollectingErrorListener,
    ErrorListener,
    report_syntax_errors,
)

logger = get_logger("indexer")


# --- Tree-sitter language loading -------------------------------------------

def load_java_language() -> Language:
    """
    Loads the Tree-sitter Java grammar from the `tree_sitter_java` package,
    which ships the compiled grammar as a wheel (no build step).
    """
    try:
        import tree_sitter_java
    except ImportError as e:
        raise GrammarLoadError(
            "Could not load Java grammar.\n"
            "- Install `tree-sitter-java` (pip install tree-sitter-java)."
        ) from e
    return Language(tree_sitter_java.language())


# --- The Indexer -------------------------------------------------------------

class JavaIndexer:
    """
    Parses Java sources with Tree-sitter and extracts their declaration model:
    classes -> methods, fields and nested classes.

    Holds only the parser; every call to `index_source` is independent and
    nothing is remembered between files. Not thread-safe: use one indexer
    per thread.
    """

    def __init__(self, listener_factory: Callable[[], ErrorListener] = CollectingErrorListener):
        self.language = load_java_language()
        self.parser = Parser(self.language)
        self.listener_factory = listener_factory

    def parse_checked(self, source_bytes: bytes) -> Node:
        """
        Parses and returns the root node, raising JavaSyntaxError when the
        tree contains ERROR or MISSING nodes.
        """
        tree: Tree = self.parser.parse(source_bytes)
        issues = report_syntax_errors(source_bytes, tree.root_node, self.listener_factory())
        if issues:
            raise JavaSyntaxError(issues)
        return tree.root_node

    def index_source(self, source: str, file_path: str, package_name: str = "") -> ExtractionResult:
        """
        Parses & extracts a Java source file. Never raises for a bad file:
        syntax and extraction failures come back as a failed ExtractionResult.
        """
        file_name = FileName(file_path)
        source_bytes = source.encode("utf-8")
        try:
            root = self.parse_checked(source_bytes)
            declarations = extract_compilation_unit(source_bytes, root, file_name, package_name)
        except JavaSyntaxError as e:
            logger.warning("Syntax error in %s: %s", file_path, e)
            return ExtractionResult.failed(file_name, ExtractionStatus.SYNTAX_ERROR, str(e), e.issues)
        except ExtractionError as e:
            logger.warning("Could not extract %s: %s", file_path, e)
            return ExtractionResult.failed(file_name, ExtractionStatus.EXTRACTION_ERROR, str(e))

        logger.debug("%s: %d top-level declaration(s)", file_path, len(declarations))
        return ExtractionResult.parsed(file_name, declarations)
