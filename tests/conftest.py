import pytest

from decl_index.src.decl_index.indexer import JavaIndexer


@pytest.fixture(scope="session")
def indexer() -> JavaIndexer:
    """One parser for the whole run; the grammar only needs loading once."""
    return JavaIndexer()


@pytest.fixture
def extract(indexer):
    """Extract top-level ClassInfos from source, failing the test on a parse failure."""

    def _extract(source: str, file_path: str = "F.java", package: str = ""):
        result = indexer.index_source(source, file_path, package)
        assert result.ok, result.message
        return list(result.declarations)

    return _extract


@pytest.fixture
def find_node(indexer):
    """Parse source and return (source_bytes, first node of the given type in document order)."""

    def _find(source: str, node_type: str):
        source_bytes = source.encode("utf-8")
        tree = indexer.parser.parse(source_bytes)
        stack = [tree.root_node]
        while stack:
            node = stack.pop()
            if node.type == node_type:
                return source_bytes, node
            stack.extend(reversed(node.children))
        raise AssertionError(f"no {node_type} node in source")

    return _find
