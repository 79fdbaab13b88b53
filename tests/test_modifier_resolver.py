"""Tests for modifier resolution on type declarations."""

from decl_index.src.decl_index.extraction.modifier_resolver import resolve_modifiers
from decl_index.src.decl_index.models.modifiers import Modifier


def _modifiers(extract, source: str):
    (info,) = extract(source)
    return info.modifiers


def test_modifier_union_is_order_independent(extract) -> None:
    first = _modifiers(extract, "public final class A {}")
    second = _modifiers(extract, "final public class A {}")
    assert first == second == frozenset({Modifier.PUBLIC, Modifier.FINAL})


def test_repeated_modifier_is_idempotent(extract) -> None:
    assert _modifiers(extract, "public public class A {}") == frozenset({Modifier.PUBLIC})


def test_each_keyword_maps_to_one_flag(extract) -> None:
    assert _modifiers(extract, "abstract strictfp class A {}") == frozenset(
        {Modifier.ABSTRACT, Modifier.STRICT}
    )
    assert _modifiers(extract, "protected static class A {}") == frozenset(
        {Modifier.PROTECTED, Modifier.STATIC}
    )
    assert _modifiers(extract, "private interface I {}") == frozenset({Modifier.PRIVATE})


def test_annotations_and_unmapped_keywords_contribute_nothing(extract) -> None:
    assert _modifiers(extract, "@Deprecated public class A {}") == frozenset({Modifier.PUBLIC})
    assert _modifiers(extract, "class A {}") == frozenset()


def test_enum_modifiers_are_resolved(extract) -> None:
    assert _modifiers(extract, "public enum E { X }") == frozenset({Modifier.PUBLIC})


def test_missing_modifiers_node_resolves_to_empty_set() -> None:
    assert resolve_modifiers(None) == frozenset()


def test_resolve_modifiers_reads_keyword_children(find_node) -> None:
    _, modifiers = find_node("public static final class A {}", "modifiers")
    assert resolve_modifiers(modifiers) == frozenset(
        {Modifier.PUBLIC, Modifier.STATIC, Modifier.FINAL}
    )
