"""Tests for the type annotation tokenizer, parser and converter."""

import pytest

from yuidoc_to_dts.diagnostics import UNPARSEABLE_TYPE, Diagnostics
from yuidoc_to_dts.errors import TypeSyntaxError
from yuidoc_to_dts.generation_context import GenerationContext
from yuidoc_to_dts.load_config import DEFAULT_CONFIG
from yuidoc_to_dts.type_converter import TypeConverter, split_union
from yuidoc_to_dts.type_parser import (
    ArrayType,
    GenericType,
    TypeName,
    TypeParser,
    UnionType,
    VariadicType,
)
from yuidoc_to_dts.type_tokenizer import (
    ELLIPSIS,
    NAME,
    OTHER,
    TypeTokenizer,
    has_ellipsis,
)


@pytest.fixture
def converter() -> TypeConverter:
    """Converter without relative naming."""
    return TypeConverter(dict(DEFAULT_CONFIG["type_aliases"]))


def test_tokenize_name_followed_by_ellipsis() -> None:
    """Verify that trailing dots belong to the ellipsis, not the name."""
    tokens = TypeTokenizer().tokenize("Ember.Foo...")
    assert [(t.kind, t.text) for t in tokens] == [
        (NAME, "Ember.Foo"),
        (ELLIPSIS, "..."),
    ]


def test_tokenize_unknown_characters() -> None:
    """Verify that unexpected characters become OTHER tokens."""
    tokens = TypeTokenizer().tokenize("Foo=1")
    assert [t.kind for t in tokens][:2] == [NAME, OTHER]


def test_has_ellipsis() -> None:
    """Verify variadic marker detection in either position."""
    assert has_ellipsis("String...")
    assert has_ellipsis("...String")
    assert has_ellipsis("String...|Array")
    assert not has_ellipsis("Ember.String")


def test_parse_structures() -> None:
    """Verify the parser builds the expected tree shapes."""
    parser = TypeParser()
    assert parser.parse("Array<String>") == GenericType(
        "Array", (TypeName("String"),)
    )
    assert parser.parse("String|Number") == UnionType(
        (TypeName("String"), TypeName("Number"))
    )
    assert parser.parse("Foo[]") == ArrayType(TypeName("Foo"))
    assert parser.parse("String...") == VariadicType(TypeName("String"))
    assert parser.parse("Map<String, Array<Number>>") == GenericType(
        "Map",
        (TypeName("String"), GenericType("Array", (TypeName("Number"),))),
    )


def test_parse_errors() -> None:
    """Verify malformed annotations raise TypeSyntaxError."""
    parser = TypeParser()
    with pytest.raises(TypeSyntaxError):
        parser.parse("Array<String")
    with pytest.raises(TypeSyntaxError):
        parser.parse("Function(String)")
    with pytest.raises(TypeSyntaxError):
        parser.parse("")


def test_primitive_aliases(converter: TypeConverter) -> None:
    """Verify documented primitives map to their TypeScript equivalents."""
    assert converter.convert("Boolean") == "boolean"
    assert converter.convert("String") == "string"
    assert converter.convert("Number") == "number"
    assert converter.convert("Array") == "any[]"
    assert converter.convert("Tuple") == "any[]"
    assert converter.convert("Void") == "void"
    assert converter.convert("Object") == "{}"
    assert converter.convert("Object?") == "{}"
    assert converter.convert("Hash") == "{}"
    assert converter.convert("*") == "any"
    assert converter.convert("Mixed") == "any"
    assert converter.convert("Promise") == "Promise<any>"


def test_unknown_names_pass_through(converter: TypeConverter) -> None:
    """Verify names outside the alias table are kept as written."""
    assert converter.convert("DOMElement") == "DOMElement"
    assert converter.convert("Function") == "Function"
    assert converter.convert("boolean") == "boolean"


def test_union(converter: TypeConverter) -> None:
    """Verify each union branch is converted independently."""
    assert converter.convert("String|Number") == "string|number"
    assert converter.convert("Array|Boolean|Foo") == "any[]|boolean|Foo"


def test_generic_commas_become_union(converter: TypeConverter) -> None:
    """Verify commas inside generics are normalized to bars."""
    assert converter.convert("Array<String,Number>") == "Array<string|number>"
    assert converter.convert("Array<String, Number>") == "Array<string|number>"
    assert (
        converter.convert("Map<String,Array<Number>>") == "Map<string|Array<number>>"
    )


def test_description_is_dropped(converter: TypeConverter) -> None:
    """Verify trailing free text after the type is ignored."""
    assert converter.convert("String the name of the thing") == "string"
    assert converter.convert("  Number  ") == "number"


def test_spaced_bar_does_not_pull_in_description(converter: TypeConverter) -> None:
    """Verify whitespace ends a top-level type even before a bar."""
    assert converter.convert("String | Number") == "string"
    assert converter.convert("Boolean | if set, skips") == "boolean"
    assert converter.convert("String| the name") == "string"
    assert converter.convert("Array<String | Number>") == "Array<string|number>"
    assert converter.convert("(String | Number)[]") == "(string|number)[]"


def test_curly_braces(converter: TypeConverter) -> None:
    """Verify braced annotations use their interior, or stay opaque."""
    assert converter.convert("{Object}") == "{}"
    assert converter.convert("{String|Number}") == "string|number"
    assert converter.convert("{a: string}") == "{a: string}"


def test_arrays(converter: TypeConverter) -> None:
    """Verify array suffixes, including arrays of unions."""
    assert converter.convert("String[]") == "string[]"
    assert converter.convert("(String|Number)[]") == "(string|number)[]"


def test_variadic_renders_inner_type(converter: TypeConverter) -> None:
    """Verify that the ellipsis marker does not leak into the type."""
    assert converter.convert("String...") == "string"
    assert converter.convert("String...|Array") == "string|any[]"


def test_unparseable_falls_back_once() -> None:
    """Verify a diagnostic is recorded once and the raw token kept."""
    diagnostics = Diagnostics()
    converter = TypeConverter({}, diagnostics=diagnostics)
    assert converter.convert("Function(String) callback") == "Function(String)"
    assert converter.convert("Function(String) callback") == "Function(String)"
    assert len(diagnostics.by_code(UNPARSEABLE_TYPE)) == 1


def test_relative_names_applied_per_branch() -> None:
    """Verify names are relativised against the referencing class."""
    context = GenerationContext.create()
    converter = context.converter
    assert converter.convert("Ember.Foo|String", "Ember.Bar") == "Foo|string"
    assert converter.convert("Array<Ember.Foo>", "Ember.Bar") == "Array<Foo>"
    assert converter.convert("Ember.Object", "Ember.Bar") == "Ember.Object"


def test_split_union() -> None:
    """Verify splitting ignores bars nested in brackets."""
    assert split_union("Foo<A|B>|C") == ["Foo<A|B>", "C"]
    assert split_union("(A|B)[]") == ["(A|B)[]"]
    assert split_union("string") == ["string"]
