"""End-to-end tests for the indexer entry point and syntax error handling."""

import pytest

from decl_index.src.decl_index import indexer as indexer_module
from decl_index.src.decl_index.errors import ExtractionError, JavaSyntaxError
from decl_index.src.decl_index.extraction.driver import find_package
from decl_index.src.decl_index.indexer import JavaIndexer
from decl_index.src.decl_index.models.ast_models import (
    Argument,
    ClassInfo,
    ExtractionStatus,
    FieldInfo,
    MethodInfo,
)
from decl_index.src.decl_index.models.type_names import PrimitiveType, TypeName
from decl_index.src.decl_index.syntax_errors import (
    CollectingErrorListener,
    ErrorListener,
    RaisingErrorListener,
    SyntaxIssue,
    report_syntax_errors,
)


def test_end_to_end_scenario(indexer) -> None:
    result = indexer.index_source("class A { int x; void m(int y) {} class B {} }", "F", "p")

    assert result.status is ExtractionStatus.PARSED
    (a,) = result.declarations
    assert a.class_name.qualified_name == "p/F#A"
    assert a.class_name.package.name == "p"
    assert a.class_name.file.path == "F"

    field, method, nested = a.children
    assert isinstance(field, FieldInfo)
    assert field.name == "x"
    assert field.field_name.type_signature == TypeName.of_primitive(PrimitiveType.INT).signature

    assert isinstance(method, MethodInfo)
    assert method.name == "m"
    assert method.arguments == (Argument("y", TypeName.of_primitive(PrimitiveType.INT)),)
    assert method.return_type == TypeName.void()

    assert isinstance(nested, ClassInfo)
    assert nested.class_name.short_name == "A$B"


def test_package_declaration_wins_over_supplied_package(indexer) -> None:
    result = indexer.index_source("package com.acme.demo;\nclass A {}", "A.java", "fallback")
    (a,) = result.declarations
    assert a.class_name.package.name == "com.acme.demo"
    assert a.class_name.qualified_name == "com.acme.demo/A.java#A"


def test_top_level_order_is_preserved(indexer) -> None:
    result = indexer.index_source("enum C { X } class A {} interface B {}", "F.java")
    assert [c.class_name.name for c in result.declarations] == ["C", "A", "B"]


def test_syntax_error_yields_failed_empty_result(indexer) -> None:
    result = indexer.index_source("class A { int x;", "Broken.java", "p")

    assert result.status is ExtractionStatus.SYNTAX_ERROR
    assert not result.ok
    assert result.declarations == ()
    assert result.issues
    assert result.message


def test_empty_file_is_parsed_not_failed(indexer) -> None:
    for source in ("", "// nothing here\n", "package p;\nimport java.util.List;\n"):
        result = indexer.index_source(source, "Empty.java")
        assert result.status is ExtractionStatus.PARSED
        assert result.declarations == ()


def test_raising_listener_still_returns_result() -> None:
    strict = JavaIndexer(listener_factory=RaisingErrorListener)
    result = strict.index_source("class A {", "Broken.java")
    assert result.status is ExtractionStatus.SYNTAX_ERROR
    assert len(result.issues) == 1


class _CountingListener(ErrorListener):
    """A listener that keeps its own bookkeeping and no `issues` list."""

    def __init__(self):
        self.seen = 0

    def syntax_error(self, line: int, col: int, message: str) -> None:
        self.seen += 1


def test_custom_listener_does_not_hide_syntax_errors() -> None:
    listeners = []

    def _factory():
        listeners.append(_CountingListener())
        return listeners[-1]

    custom = JavaIndexer(listener_factory=_factory)
    result = custom.index_source("class A { int x; void m( }", "Bad.java")

    assert result.status is ExtractionStatus.SYNTAX_ERROR
    assert result.declarations == ()
    assert listeners[0].seen == len(result.issues) > 0
    assert all(isinstance(issue, SyntaxIssue) for issue in result.issues)


def test_report_syntax_errors_returns_issues(indexer) -> None:
    source = b"class A {"
    listener = _CountingListener()
    issues = report_syntax_errors(source, indexer.parser.parse(source).root_node, listener)
    assert issues and listener.seen == len(issues)


def test_parse_checked_raises_on_syntax_error(indexer) -> None:
    with pytest.raises(JavaSyntaxError) as excinfo:
        indexer.parse_checked(b"class A { void m( }")
    assert excinfo.value.issues


def test_report_syntax_errors_collects_missing_and_error_nodes(indexer) -> None:
    source = b"class A { int x = ; "
    tree = indexer.parser.parse(source)
    listener = CollectingErrorListener()
    report_syntax_errors(source, tree.root_node, listener)
    assert listener.issues
    assert all(issue.line == 0 for issue in listener.issues)


def test_clean_tree_reports_nothing(indexer) -> None:
    source = b"class A { }"
    listener = CollectingErrorListener()
    report_syntax_errors(source, indexer.parser.parse(source).root_node, listener)
    assert listener.issues == []


def test_extraction_error_is_contained(indexer, monkeypatch) -> None:
    def _explode(*args, **kwargs):
        raise ExtractionError("class_declaration", 0, 0, "name")

    monkeypatch.setattr(indexer_module, "extract_compilation_unit", _explode)
    result = indexer.index_source("class A {}", "A.java")
    assert result.status is ExtractionStatus.EXTRACTION_ERROR
    assert result.declarations == ()
    assert "has no name" in result.message


def test_find_package(indexer) -> None:
    source = b"package a.b.c;\nclass A {}"
    assert find_package(source, indexer.parser.parse(source).root_node) == "a.b.c"
    assert find_package(b"class A {}", indexer.parser.parse(b"class A {}").root_node) is None
