"""Index of known types, used to resolve cross-references for display."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from xmldoc_help.command_info import CommandInfo
    from xmldoc_help.member_descriptor import TypeRef


@dataclass(frozen=True)
class IndexedType:
    """A resolved type, with the command it implements if any."""

    type_ref: TypeRef
    command: CommandInfo | None = None


class TypeIndex:
    """Looks up types by full name; built once from the enumerated entities."""

    def __init__(
        self,
        types: Iterable[TypeRef] = (),
        commands: Iterable[CommandInfo] = (),
    ) -> None:
        """Index the given types; command types are added if not listed."""
        self._by_name: dict[str, IndexedType] = {}
        for t in types:
            self._by_name[t.full_name] = IndexedType(t)
        for c in commands:
            self._by_name[c.type_ref.full_name] = IndexedType(c.type_ref, c)

    def __call__(self, full_name: str) -> IndexedType | None:
        """Resolve a full name (nested types joined by dots)."""
        return self._by_name.get(full_name.replace("+", "."))

    def __len__(self) -> int:
        return len(self._by_name)
