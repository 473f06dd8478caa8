"""The comment reader interface and the standard reader pipeline."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

from xmldoc_help.caching_comment_reader import CachingCommentReader
from xmldoc_help.reporting_comment_reader import ReportingCommentReader
from xmldoc_help.rewrite_crefs import RewritingCommentReader

if TYPE_CHECKING:
    import xml.etree.ElementTree as ET

    from xmldoc_help.cref_text import TypeResolver
    from xmldoc_help.member_descriptor import MemberDescriptor

ReportWarning = Callable[["MemberDescriptor", str], None]


class CommentReader(Protocol):
    """Anything that can look up the doc comments of a documented entity."""

    def get_comments(self, descriptor: MemberDescriptor) -> ET.Element | None:
        """Return the `<member>` element for the descriptor, or None."""
        ...


def build_comment_reader(
    store: CommentReader,
    resolve_type: TypeResolver,
    report_warning: ReportWarning | None = None,
    *,
    cache: bool = True,
    rewrite: bool = True,
) -> CommentReader:
    """Wrap a store with rewriting, caching and (optionally) reporting, in that order."""
    reader: CommentReader = store
    if rewrite:
        reader = RewritingCommentReader(reader, resolve_type)
    if cache:
        reader = CachingCommentReader(reader)
    if report_warning is not None:
        reader = ReportingCommentReader(reader, report_warning)
    return reader
