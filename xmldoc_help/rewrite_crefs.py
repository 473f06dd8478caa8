"""Collapse `<see cref="..."/>` elements in doc comments into plain text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from xmldoc_help.cref_text import text_for_cref

if TYPE_CHECKING:
    import xml.etree.ElementTree as ET

    from xmldoc_help.comment_reader import CommentReader
    from xmldoc_help.cref_text import TypeResolver
    from xmldoc_help.member_descriptor import MemberDescriptor


class RewritingCommentReader:
    """Decorates a reader, expanding cross-references in what it returns."""

    def __init__(self, proxy: CommentReader, resolve_type: TypeResolver) -> None:
        """Wrap `proxy`, resolving `T:` references through `resolve_type`."""
        self._proxy = proxy
        self._resolve_type = resolve_type

    def get_comments(self, descriptor: MemberDescriptor) -> ET.Element | None:
        """Return the proxy's comments with `<see cref>` elements collapsed."""
        element = self._proxy.get_comments(descriptor)
        if element is None:
            return None
        collapse_see_elements(element, self._resolve_type)
        return element


def collapse_see_elements(element: ET.Element, resolve_type: TypeResolver) -> None:
    """Replace collapsible `<see>` descendants of `element` with text, in place."""
    for child in list(element):
        text = _see_text(child, resolve_type)
        if text:
            _replace_with_text(element, child, text)
        else:
            collapse_see_elements(child, resolve_type)


def _see_text(element: ET.Element, resolve_type: TypeResolver) -> str | None:
    if element.tag != "see":
        return None
    cref = element.get("cref")
    if cref is None:
        return None
    text = "".join(element.itertext())
    if not text.strip():
        text = text_for_cref(cref, resolve_type)
    return text if text.strip() else None


def _replace_with_text(parent: ET.Element, child: ET.Element, text: str) -> None:
    text += child.tail or ""
    index = list(parent).index(child)
    if index == 0:
        parent.text = (parent.text or "") + text
    else:
        prev = parent[index - 1]
        prev.tail = (prev.tail or "") + text
    parent.remove(child)
