"""Flatten doc comment fragments into display text."""

import re
import xml.etree.ElementTree as ET

WHITESPACE_RE = re.compile(r"\s+")


def fragment_text(element: ET.Element | None) -> str:
    """Return all text under `element`, whitespace runs collapsed, trimmed."""
    if element is None:
        return ""
    return WHITESPACE_RE.sub(" ", "".join(element.itertext())).strip()


def section_text(fragment: ET.Element | None, tag: str) -> str:
    """Return the text of the first `<tag>` child of a fragment, e.g. `summary`."""
    if fragment is None:
        return ""
    return fragment_text(fragment.find(tag))
