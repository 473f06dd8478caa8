"""Convert a `cref` attribute value into short display text."""

from __future__ import annotations

from collections.abc import Callable

from xmldoc_help.type_index import IndexedType

TypeResolver = Callable[[str], IndexedType | None]


def text_for_cref(cref: str, resolve_type: TypeResolver) -> str:
    """Return readable text for a cross-reference target.

    A `T:` reference to a known command renders as `Verb-Noun`, to any other
    known type as its unqualified name. Anything else falls back to the last
    dotted segment of the identifier, ignoring a parameter list or
    conversion suffix.
    """
    if cref.startswith("T:"):
        resolved = resolve_type(cref[2:])
        if resolved is not None:
            if resolved.command is not None:
                return resolved.command.name
            return resolved.type_ref.metadata_name

    target = cref.split("(", 1)[0].split("~", 1)[0]
    _, dot, last = target.rpartition(".")
    if dot:
        return last
    if len(target) >= 2 and target[1] == ":":
        return target[2:]
    return target
