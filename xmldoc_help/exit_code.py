"""Process exit codes for the documentation checker."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Outcome of a checking run."""

    SUCCESS = 0
    COMMENTS_NOT_FOUND = 3  # The XML doc comments file does not exist
    COMMENTS_LOAD_ERROR = 4  # The XML doc comments file could not be parsed or validated
    UNHANDLED_EXCEPTION = 5
    WARNINGS_AS_ERRORS = 6  # Warnings occurred in strict mode
    MANIFEST_ERROR = 7  # The entity manifest could not be loaded
    CONFIG_ERROR = 8  # A configuration file is missing or malformed
