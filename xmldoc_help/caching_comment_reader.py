"""Memoize doc comment lookups for the duration of a run."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from xmldoc_help.identifier_encoder import encode_member

if TYPE_CHECKING:
    import xml.etree.ElementTree as ET

    from xmldoc_help.comment_reader import CommentReader
    from xmldoc_help.member_descriptor import MemberDescriptor


class CachingCommentReader:
    """Decorates a reader, computing each identifier's comments at most once.

    Absent comments are cached too. Callers must treat returned elements as
    read-only, since repeated lookups share them. Under concurrent use two
    threads may both compute the same entry; the last write wins.
    """

    def __init__(self, proxy: CommentReader) -> None:
        """Wrap `proxy`."""
        self._proxy = proxy
        self._cache: dict[str, ET.Element | None] = {}
        self._lock = threading.Lock()

    def get_comments(self, descriptor: MemberDescriptor) -> ET.Element | None:
        """Return cached comments, asking the proxy on first use."""
        key = encode_member(descriptor)
        with self._lock:
            if key in self._cache:
                return self._cache[key]
        result = self._proxy.get_comments(descriptor)
        with self._lock:
            self._cache[key] = result
        return result

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)
