"""Encode documented entities as XML doc comment member identifiers.

The identifiers match what the C# compiler writes into the `name` attribute of
`<member>` elements, e.g. `T:N.C`, `M:N.C.#ctor(System.Int32)`,
`M:N.C.Foo``1(``0[],System.Int32@)` or `M:N.C.op_Implicit(N.C)~System.Int32`.
"""

from collections.abc import Iterable

from xmldoc_help.errors import UnsupportedDescriptorError
from xmldoc_help.member_descriptor import (
    ConstructorRef,
    EventRef,
    FieldRef,
    MemberDescriptor,
    MethodRef,
    PropertyRef,
    TypeRef,
)
from xmldoc_help.type_descriptor import (
    ArrayOf,
    ByRef,
    GenericInstantiation,
    GenericParameter,
    Ordinary,
    PointerTo,
    TypeDescriptor,
)


def encode_member(descriptor: MemberDescriptor) -> str:
    """Return the member identifier for a type or type member."""
    if isinstance(descriptor, TypeRef):
        return "T:" + descriptor.full_name
    if isinstance(descriptor, FieldRef):
        return _member_identifier("F:", descriptor.owner, descriptor.name)
    if isinstance(descriptor, EventRef):
        return _member_identifier("E:", descriptor.owner, descriptor.name)
    if isinstance(descriptor, PropertyRef):
        return _member_identifier(
            "P:",
            descriptor.owner,
            descriptor.name,
            parameter_types=descriptor.index_parameter_types,
        )
    if isinstance(descriptor, ConstructorRef):
        prefix = "M:" + descriptor.owner.full_name + "."
        ident = _member_identifier(
            "M:",
            descriptor.owner,
            descriptor.name,
            parameter_types=descriptor.parameter_types,
        )
        # .ctor -> #ctor, .cctor -> #cctor
        return prefix + "#" + ident[len(prefix) + 1 :]
    if isinstance(descriptor, MethodRef):
        ident = _member_identifier(
            "M:",
            descriptor.owner,
            descriptor.name,
            generic_arity=descriptor.generic_arity,
            parameter_types=descriptor.parameter_types,
        )
        if descriptor.is_conversion_operator:
            ident += "~" + encode_type(descriptor.return_type)
        return ident
    raise UnsupportedDescriptorError(descriptor)


def encode_type(descriptor: TypeDescriptor | None) -> str:
    """Return the identifier form of a parameter or return type."""
    decoration, core = _reduce_to_element_type(descriptor)

    if isinstance(core, GenericInstantiation):
        name = core.definition.definition_name
        return name + "{" + encode_types(core.arguments) + "}" + decoration
    if isinstance(core, GenericParameter):
        ticks = "``" if core.is_method_level else "`"
        return f"{ticks}{core.position}{decoration}"
    if isinstance(core, Ordinary):
        return core.full_name + decoration
    raise UnsupportedDescriptorError(core)


def encode_types(descriptors: Iterable[TypeDescriptor]) -> str:
    """Return a comma-separated list of encoded types."""
    return ",".join(encode_type(d) for d in descriptors)


def _member_identifier(
    prefix: str,
    owner: TypeRef,
    name: str,
    *,
    generic_arity: int = 0,
    parameter_types: tuple[TypeDescriptor, ...] = (),
) -> str:
    parts = [prefix, owner.full_name, ".", name]
    if generic_arity:
        parts.append(f"``{generic_arity}")
    if parameter_types:
        parts += ["(", encode_types(parameter_types), ")"]
    return "".join(parts)


def _reduce_to_element_type(
    descriptor: TypeDescriptor | None,
) -> tuple[str, TypeDescriptor | None]:
    """Strip by-ref, array and pointer layers, returning (decoration, core).

    Each array or pointer layer is inserted at the front of the decoration, so
    `int[][,]` (a 2-D array of vectors) yields `[][0:,0:]`.
    """
    decoration = ""
    while isinstance(descriptor, ByRef):
        decoration += "@"
        descriptor = descriptor.referent

    while isinstance(descriptor, ArrayOf):
        if descriptor.rank == 1:
            decoration = "[]" + decoration
        else:
            bounds = ",".join(["0:"] * descriptor.rank)
            decoration = "[" + bounds + "]" + decoration
        descriptor = descriptor.element

    while isinstance(descriptor, PointerTo):
        decoration = "*" + decoration
        descriptor = descriptor.pointee

    return decoration, descriptor
