"""Data models for parameter, return and generic-argument types."""

from __future__ import annotations

from dataclasses import dataclass, field


def normalize_type_name(name: str) -> str:
    """Join nested type names with dots instead of the reflection `+` separator."""
    return name.replace("+", ".")


@dataclass(frozen=True)
class Ordinary:
    """A non-generic type or a generic type definition, by full name."""

    full_name: str  # e.g. System.Collections.Generic.List`1
    generic_definition_arity: int = 0

    def __post_init__(self) -> None:
        """Normalize nested-type separators."""
        if not self.full_name:
            msg = "Type name must not be empty"
            raise ValueError(msg)
        object.__setattr__(self, "full_name", normalize_type_name(self.full_name))

    @property
    def definition_name(self) -> str:
        """Return the name with the generic arity marker erased."""
        tick = self.full_name.find("`")
        return self.full_name if tick == -1 else self.full_name[:tick]


@dataclass(frozen=True)
class GenericInstantiation:
    """A generic type definition with concrete type arguments."""

    definition: Ordinary
    arguments: tuple[TypeDescriptor, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Check argument count and decoration placement."""
        object.__setattr__(self, "arguments", tuple(self.arguments))
        if not self.arguments:
            msg = f"Generic instantiation of {self.definition.full_name} has no arguments"
            raise ValueError(msg)
        arity = self.definition.generic_definition_arity
        if arity and arity != len(self.arguments):
            msg = (
                f"{self.definition.full_name} expects {arity} type arguments, "
                f"got {len(self.arguments)}"
            )
            raise ValueError(msg)
        for arg in self.arguments:
            _reject_by_ref(arg, "generic argument")


@dataclass(frozen=True)
class GenericParameter:
    """A type parameter of the enclosing type, or of the method itself."""

    position: int
    is_method_level: bool = False


@dataclass(frozen=True)
class ArrayOf:
    """An array; rank 1 is a simple vector, rank 2+ is multi-dimensional."""

    element: TypeDescriptor
    rank: int = 1

    def __post_init__(self) -> None:
        """Validate rank and element."""
        if self.rank < 1:
            msg = f"Array rank must be at least 1, got {self.rank}"
            raise ValueError(msg)
        _reject_by_ref(self.element, "array element")


@dataclass(frozen=True)
class PointerTo:
    """An unmanaged pointer."""

    pointee: TypeDescriptor

    def __post_init__(self) -> None:
        """Validate pointee."""
        _reject_by_ref(self.pointee, "pointer target")


@dataclass(frozen=True)
class ByRef:
    """A by-reference parameter type (ref/out/in)."""

    referent: TypeDescriptor

    def __post_init__(self) -> None:
        """Validate referent."""
        _reject_by_ref(self.referent, "by-ref target")


TypeDescriptor = (
    Ordinary | GenericInstantiation | GenericParameter | ArrayOf | PointerTo | ByRef
)


def _reject_by_ref(inner: object, role: str) -> None:
    # By-ref is only ever the outermost decoration of a parameter type.
    if isinstance(inner, ByRef):
        msg = f"A by-ref type cannot be used as a {role}"
        raise ValueError(msg)
