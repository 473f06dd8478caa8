"""Data models for the documented entities: types and their members."""

from __future__ import annotations

from dataclasses import dataclass, field

from xmldoc_help.type_descriptor import TypeDescriptor

CONVERSION_OPERATOR_NAMES = frozenset({"op_Explicit", "op_Implicit"})


@dataclass(frozen=True)
class TypeRef:
    """A documented type, always referring to its generic definition."""

    namespace: str
    simple_name: str
    generic_arity: int = 0
    declaring_type_chain: tuple[str, ...] = ()  # outermost first, e.g. ("Outer`1",)

    def __post_init__(self) -> None:
        """Freeze the declaring chain."""
        object.__setattr__(self, "declaring_type_chain", tuple(self.declaring_type_chain))

    @classmethod
    def parse(cls, name: str) -> TypeRef:
        """Build a TypeRef from a reflection-style name such as `N.Outer+Inner`2`."""
        outer, *nested = name.split("+")
        namespace, _, outermost = outer.rpartition(".")
        chain = [outermost, *nested]
        simple_name, arity = _split_arity(chain[-1])
        return cls(
            namespace=namespace,
            simple_name=simple_name,
            generic_arity=arity,
            declaring_type_chain=tuple(chain[:-1]),
        )

    @property
    def metadata_name(self) -> str:
        """Return the unqualified name, with the arity marker when generic."""
        if self.generic_arity:
            return f"{self.simple_name}`{self.generic_arity}"
        return self.simple_name

    @property
    def full_name(self) -> str:
        """Return the fully-qualified name with nested types joined by dots."""
        parts = [self.namespace, *self.declaring_type_chain, self.metadata_name]
        return ".".join(p for p in parts if p)


@dataclass(frozen=True)
class FieldRef:
    """A field of a type."""

    owner: TypeRef
    name: str


@dataclass(frozen=True)
class PropertyRef:
    """A property, optionally indexed."""

    owner: TypeRef
    name: str
    index_parameter_types: tuple[TypeDescriptor, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "index_parameter_types", tuple(self.index_parameter_types))


@dataclass(frozen=True)
class EventRef:
    """An event of a type."""

    owner: TypeRef
    name: str


@dataclass(frozen=True)
class ConstructorRef:
    """An instance or static constructor."""

    owner: TypeRef
    parameter_types: tuple[TypeDescriptor, ...] = field(default_factory=tuple)
    is_static: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameter_types", tuple(self.parameter_types))

    @property
    def name(self) -> str:
        """Return the metadata name of the constructor."""
        return ".cctor" if self.is_static else ".ctor"


@dataclass(frozen=True)
class MethodRef:
    """A method, possibly generic, possibly a user-defined conversion operator."""

    owner: TypeRef
    name: str
    generic_arity: int = 0
    parameter_types: tuple[TypeDescriptor, ...] = field(default_factory=tuple)
    return_type: TypeDescriptor | None = None

    def __post_init__(self) -> None:
        """Freeze parameters; conversion operators need their return type."""
        object.__setattr__(self, "parameter_types", tuple(self.parameter_types))
        if self.is_conversion_operator and self.return_type is None:
            msg = f"Conversion operator {self.name} requires a return type"
            raise ValueError(msg)

    @property
    def is_conversion_operator(self) -> bool:
        """Check if this method is op_Implicit or op_Explicit."""
        return self.name in CONVERSION_OPERATOR_NAMES


MemberDescriptor = TypeRef | FieldRef | PropertyRef | EventRef | ConstructorRef | MethodRef


def _split_arity(name: str) -> tuple[str, int]:
    base, tick, arity = name.partition("`")
    if not tick:
        return name, 0
    if not arity.isdigit():
        msg = f"Invalid generic arity in type name: {name}"
        raise ValueError(msg)
    return base, int(arity)
