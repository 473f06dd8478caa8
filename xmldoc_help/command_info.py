"""Data model for a type that implements a documented command."""

from dataclasses import dataclass

from xmldoc_help.member_descriptor import TypeRef


@dataclass(frozen=True)
class CommandInfo:
    """A command, named verb-noun, implemented by a type."""

    verb: str
    noun: str
    type_ref: TypeRef

    @property
    def name(self) -> str:
        """Return the command name, e.g. Get-Thing."""
        return f"{self.verb}-{self.noun}"
