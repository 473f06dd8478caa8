"""Load the YAML manifest listing the entities to document.

Example:

    types:
      - name: Acme.Commands.GetWidgetCommand
        command: {verb: Get, noun: Widget}
      - name: Acme.Widget
    members:
      - kind: property
        owner: Acme.Commands.GetWidgetCommand
        name: Name
      - kind: method
        owner: Acme.Widget
        name: Resize
        parameters: [System.Int32, "System.Int32[]"]
      - kind: constructor
        owner: Acme.Widget
        parameters: [System.String]
      - kind: method
        owner: Acme.Widget
        name: op_Implicit
        parameters: [Acme.Widget]
        returns: System.String
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from xmldoc_help.command_info import CommandInfo
from xmldoc_help.errors import ManifestError
from xmldoc_help.member_descriptor import (
    ConstructorRef,
    EventRef,
    FieldRef,
    MemberDescriptor,
    MethodRef,
    PropertyRef,
    TypeRef,
)
from xmldoc_help.parse_type_name import parse_type_name
from xmldoc_help.type_index import TypeIndex


@dataclass
class Manifest:
    """The documented entities, in manifest order, and the type index."""

    entities: list[MemberDescriptor] = field(default_factory=list)
    commands: list[CommandInfo] = field(default_factory=list)
    type_index: TypeIndex = field(default_factory=TypeIndex)


def load_manifest(path: str | Path) -> Manifest:
    """Load and validate a manifest file."""
    p = Path(path)
    if not p.is_file():
        msg = f"Manifest file not found: {p}"
        raise ManifestError(msg)
    try:
        doc = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        msg = f"Manifest {p} is not valid YAML: {e}"
        raise ManifestError(msg) from e
    return build_manifest(doc)


def build_manifest(doc: dict[str, Any]) -> Manifest:
    """Build descriptors and the type index from a parsed manifest."""
    if not isinstance(doc, dict):
        msg = "Manifest must be a mapping with 'types' and/or 'members'"
        raise ManifestError(msg)

    manifest = Manifest()
    types: dict[str, TypeRef] = {}

    for i, entry in enumerate(doc.get("types") or []):
        try:
            type_ref = TypeRef.parse(_required(entry, "name"))
            command = entry.get("command")
            if command:
                manifest.commands.append(
                    CommandInfo(
                        verb=_required(command, "verb"),
                        noun=_required(command, "noun"),
                        type_ref=type_ref,
                    )
                )
        except (ValueError, AttributeError) as e:
            msg = f"Invalid entry types[{i}]: {e}"
            raise ManifestError(msg) from e
        types[type_ref.full_name] = type_ref
        manifest.entities.append(type_ref)

    for i, entry in enumerate(doc.get("members") or []):
        try:
            member = _member_from_entry(entry)
        except (ValueError, AttributeError, TypeError) as e:
            msg = f"Invalid entry members[{i}]: {e}"
            raise ManifestError(msg) from e
        types.setdefault(member.owner.full_name, member.owner)
        manifest.entities.append(member)

    manifest.type_index = TypeIndex(types.values(), manifest.commands)
    return manifest


def _member_from_entry(entry: dict[str, Any]) -> MemberDescriptor:
    kind = str(_required(entry, "kind")).lower()
    owner = TypeRef.parse(_required(entry, "owner"))
    params = tuple(parse_type_name(str(t)) for t in entry.get("parameters") or [])

    if kind == "constructor":
        return ConstructorRef(owner, params, is_static=bool(entry.get("static", False)))

    name = _required(entry, "name")
    if kind == "field":
        return FieldRef(owner, name)
    if kind == "event":
        return EventRef(owner, name)
    if kind == "property":
        return PropertyRef(owner, name, params)
    if kind == "method":
        returns = entry.get("returns")
        return MethodRef(
            owner,
            name,
            generic_arity=int(entry.get("generic_arity", 0)),
            parameter_types=params,
            return_type=parse_type_name(str(returns)) if returns else None,
        )
    msg = f"unknown member kind {kind!r}"
    raise ValueError(msg)


def _required(entry: dict[str, Any], key: str) -> str:
    value = entry.get(key)
    if not value:
        msg = f"missing required key {key!r}"
        raise ValueError(msg)
    return str(value)
