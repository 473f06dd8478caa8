"""Report entities whose doc comments are missing."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from xmldoc_help.identifier_encoder import encode_member

if TYPE_CHECKING:
    import xml.etree.ElementTree as ET

    from xmldoc_help.comment_reader import CommentReader, ReportWarning
    from xmldoc_help.member_descriptor import MemberDescriptor

logger = logging.getLogger(__name__)

MISSING_COMMENT_WARNING = "No XML doc comment found."


class ReportingCommentReader:
    """Decorates a reader, reporting each undocumented identifier once."""

    def __init__(self, proxy: CommentReader, report_warning: ReportWarning) -> None:
        """Wrap `proxy`, sending warnings to `report_warning`."""
        self._proxy = proxy
        self._report_warning = report_warning
        self._reported: set[str] = set()
        self._lock = threading.Lock()

    def get_comments(self, descriptor: MemberDescriptor) -> ET.Element | None:
        """Return the proxy's comments; report the descriptor if there are none."""
        result = self._proxy.get_comments(descriptor)
        if result is not None:
            return result

        key = encode_member(descriptor)
        with self._lock:
            if key in self._reported:
                return None
            self._reported.add(key)
        logger.debug("Missing doc comment for %s", key)
        self._report_warning(descriptor, MISSING_COMMENT_WARNING)
        return None
