"""Collect warnings raised while reading doc comments, and report them."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from xmldoc_help.errors import WarningsAsErrorsError
from xmldoc_help.member_display_name import member_display_name

if TYPE_CHECKING:
    from collections.abc import Iterable

    from xmldoc_help.member_descriptor import MemberDescriptor

logger = logging.getLogger(__name__)


class WarningCollector:
    """Thread-safe accumulator, usable directly as a `report_warning` callback."""

    def __init__(self, suppress: Iterable[str] = ()) -> None:
        """Create an empty collector; warnings for names in `suppress` are dropped."""
        self.suppress = set(suppress)
        self._warnings: list[tuple[str, str]] = []
        self._lock = threading.Lock()

    def __call__(self, target: MemberDescriptor, warning_text: str) -> None:
        """Record a warning against a documented entity."""
        name = member_display_name(target)
        if name in self.suppress:
            return
        with self._lock:
            self._warnings.append((name, warning_text))

    def __len__(self) -> int:
        with self._lock:
            return len(self._warnings)

    def grouped(self) -> list[tuple[str, list[str]]]:
        """Return warnings grouped by entity name, names sorted."""
        groups: dict[str, list[str]] = {}
        with self._lock:
            for name, text in self._warnings:
                groups.setdefault(name, []).append(text)
        return sorted(groups.items())

    def emit(self, *, as_errors: bool = False) -> int:
        """Log all warnings; raise if any exist and warnings are errors.

        Returns the number of entities with warnings.
        """
        groups = self.grouped()
        if not groups:
            return 0

        level = logging.ERROR if as_errors else logging.WARNING
        logger.log(level, "Warnings:")
        for name, texts in groups:
            logger.log(level, "    %s:", name)
            for text in texts:
                logger.log(level, "        %s", text)

        if as_errors:
            msg = "Failing due to the occurrence of one or more warnings"
            raise WarningsAsErrorsError(msg)
        return len(groups)
