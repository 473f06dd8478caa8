"""Tests for parsing reflection-style type names."""

import pytest

from xmldoc_help.identifier_encoder import encode_type
from xmldoc_help.member_descriptor import TypeRef
from xmldoc_help.parse_type_name import TypeNameSyntaxError, parse_type_name
from xmldoc_help.type_descriptor import (
    ArrayOf,
    ByRef,
    GenericInstantiation,
    GenericParameter,
    Ordinary,
    PointerTo,
)

INT = Ordinary("System.Int32")


def test_ordinary_names() -> None:
    """Plain and nested names parse to ordinary types."""
    assert parse_type_name("System.Int32") == INT
    assert parse_type_name("N.Outer+Inner") == Ordinary("N.Outer.Inner")
    assert parse_type_name("  System.Int32  ") == INT


def test_array_suffixes() -> None:
    """Suffixes apply from the element outward."""
    assert parse_type_name("System.Int32[]") == ArrayOf(INT)
    assert parse_type_name("System.Int32[,]") == ArrayOf(INT, 2)
    assert parse_type_name("System.Int32[,,]") == ArrayOf(INT, 3)
    assert parse_type_name("System.Int32[][,]") == ArrayOf(ArrayOf(INT), 2)


def test_pointer_and_by_ref() -> None:
    """Pointers and a trailing & are recognised."""
    assert parse_type_name("System.Byte*") == PointerTo(Ordinary("System.Byte"))
    assert parse_type_name("System.Int32*[]") == ArrayOf(PointerTo(INT))
    assert parse_type_name("System.Int32&") == ByRef(INT)
    assert parse_type_name("System.Int32[]&") == ByRef(ArrayOf(INT))


def test_type_parameters() -> None:
    """! is a type-level parameter, !! a method-level one."""
    assert parse_type_name("!0") == GenericParameter(0)
    assert parse_type_name("!!1") == GenericParameter(1, is_method_level=True)
    assert parse_type_name("!!0[]") == ArrayOf(GenericParameter(0, True))


def test_generic_instantiation() -> None:
    """Angle brackets hold the type arguments."""
    parsed = parse_type_name("System.Collections.Generic.List`1<System.String>")
    assert parsed == GenericInstantiation(
        Ordinary("System.Collections.Generic.List`1", 1),
        (Ordinary("System.String"),),
    )

    parsed = parse_type_name(
        "System.Collections.Generic.Dictionary`2<System.String, System.Int32[]>[]"
    )
    assert isinstance(parsed, ArrayOf)
    assert isinstance(parsed.element, GenericInstantiation)
    assert parsed.element.arguments == (Ordinary("System.String"), ArrayOf(INT))


def test_parsed_names_encode() -> None:
    """Parsed names feed directly into the encoder."""
    assert encode_type(parse_type_name("System.Int32[][,]")) == "System.Int32[][0:,0:]"
    assert encode_type(parse_type_name("System.Int32[]&")) == "System.Int32[]@"
    assert (
        encode_type(
            parse_type_name("System.Collections.Generic.List`1<!!0>")
        )
        == "System.Collections.Generic.List{``0}"
    )


def test_syntax_errors() -> None:
    """Malformed names are rejected with their position."""
    for bad in ["", "System.Int32&[]", "List`1<System.Int32", "System.Int32[", "!x", "[]"]:
        with pytest.raises(TypeNameSyntaxError):
            parse_type_name(bad)


def test_semantic_errors() -> None:
    """Argument count and by-ref placement are checked."""
    with pytest.raises(ValueError):
        parse_type_name("System.Collections.Generic.List`1<System.Int32, System.String>")
    with pytest.raises(ValueError):
        parse_type_name("System.Collections.Generic.List`1<System.Int32&>")


def test_type_ref_parse() -> None:
    """TypeRef.parse splits namespace, enclosing types and arity."""
    ref = TypeRef.parse("N.Sub.Outer`1+Inner`2")
    assert ref.namespace == "N.Sub"
    assert ref.declaring_type_chain == ("Outer`1",)
    assert ref.simple_name == "Inner"
    assert ref.generic_arity == 2
    assert ref.metadata_name == "Inner`2"
    assert ref.full_name == "N.Sub.Outer`1.Inner`2"

    assert TypeRef.parse("Global").full_name == "Global"
    with pytest.raises(ValueError):
        TypeRef.parse("N.Bad`x")
