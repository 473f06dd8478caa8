"""Load an XML doc comments file into an identifier-to-fragment mapping."""

from __future__ import annotations

import copy
import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from types import MappingProxyType
from typing import IO, TYPE_CHECKING

from xmldoc_help.errors import DocCommentsLoadError, DocCommentsNotFoundError
from xmldoc_help.identifier_encoder import encode_member

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from xmldoc_help.member_descriptor import MemberDescriptor

logger = logging.getLogger(__name__)


class XmlDocCommentStore:
    """Read-only view of the `<member>` elements of one doc comments file."""

    def __init__(self, assembly_name: str, members: Mapping[str, ET.Element]) -> None:
        """Wrap an already validated member mapping."""
        self.assembly_name = assembly_name
        self._members = MappingProxyType(dict(members))

    def get(self, identifier: str) -> ET.Element | None:
        """Return a private copy of the `<member>` element, or None if undocumented."""
        elem = self._members.get(identifier)
        return None if elem is None else copy.deepcopy(elem)

    def get_comments(self, descriptor: MemberDescriptor) -> ET.Element | None:
        """Return the documentation for a descriptor, or None if undocumented."""
        return self.get(encode_member(descriptor))

    def identifiers(self) -> Iterator[str]:
        """Iterate over every documented identifier, in file order."""
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)


def load_doc_comments(source: str | Path | IO) -> XmlDocCommentStore:
    """Parse and validate a doc comments file from a path or an open stream."""
    if isinstance(source, (str, Path)):
        path = Path(source)
        if not path.is_file():
            raise DocCommentsNotFoundError(path)
        label = str(path)
    else:
        label = getattr(source, "name", "<stream>")

    try:
        root = ET.parse(source).getroot()
    except ET.ParseError as e:
        raise DocCommentsLoadError(str(label), f"malformed XML ({e})") from e
    except OSError as e:
        raise DocCommentsLoadError(str(label), str(e)) from e

    store = _build_store(root, str(label))
    logger.debug(
        "Loaded %d documented members for assembly %s from %s",
        len(store),
        store.assembly_name,
        label,
    )
    return store


def parse_doc_comments(text: str) -> XmlDocCommentStore:
    """Parse and validate doc comments held in a string."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise DocCommentsLoadError("<string>", f"malformed XML ({e})") from e
    return _build_store(root, "<string>")


def _build_store(root: ET.Element, label: str) -> XmlDocCommentStore:
    """Check the `<doc>` shape and index members by their `name` attribute."""

    def fail(reason: str) -> DocCommentsLoadError:
        return DocCommentsLoadError(label, reason)

    if root.tag != "doc":
        raise fail(f"root element is <{root.tag}>, expected <doc>")

    assemblies = root.findall("assembly")
    members_elems = root.findall("members")
    unexpected = [c.tag for c in root if c.tag not in ("assembly", "members")]
    if unexpected:
        raise fail(f"unexpected element <{unexpected[0]}> under <doc>")
    if len(assemblies) != 1:
        raise fail(f"expected exactly one <assembly>, found {len(assemblies)}")
    if len(members_elems) != 1:
        raise fail(f"expected exactly one <members>, found {len(members_elems)}")

    names = assemblies[0].findall("name")
    if len(names) != 1 or len(assemblies[0]) != 1:
        raise fail("<assembly> must contain exactly one <name>")
    assembly_name = (names[0].text or "").strip()

    members: dict[str, ET.Element] = {}
    for i, elem in enumerate(members_elems[0]):
        if elem.tag != "member":
            raise fail(f"unexpected element <{elem.tag}> under <members>")
        name = elem.get("name")
        if not name:
            raise fail(f"<member> #{i + 1} has no name attribute")
        if name in members:
            raise fail(f"duplicate <member> name {name!r}")
        members[name] = elem

    return XmlDocCommentStore(assembly_name, members)
