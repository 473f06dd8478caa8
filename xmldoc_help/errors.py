"""Exception types raised while loading and resolving documentation."""

from pathlib import Path

from xmldoc_help.exit_code import ExitCode


class XmlDocHelpError(Exception):
    """Base class for errors that end a checking run."""

    exit_code = ExitCode.UNHANDLED_EXCEPTION


class DocCommentsNotFoundError(XmlDocHelpError):
    """The XML doc comments file does not exist."""

    exit_code = ExitCode.COMMENTS_NOT_FOUND

    def __init__(self, path: Path) -> None:
        """Record the missing path."""
        super().__init__(f"The given XML doc comments file was not found: {path}")
        self.path = path


class DocCommentsLoadError(XmlDocHelpError):
    """The XML doc comments file is unreadable or does not match the expected shape."""

    exit_code = ExitCode.COMMENTS_LOAD_ERROR

    def __init__(self, source: str, reason: str) -> None:
        """Record the source and the reason it was rejected."""
        super().__init__(f"Failed to load XML doc comments from {source}: {reason}")
        self.source = source
        self.reason = reason


class ManifestError(XmlDocHelpError):
    """The entity manifest is missing or malformed."""

    exit_code = ExitCode.MANIFEST_ERROR


class ConfigError(XmlDocHelpError):
    """A configuration file named on the command line is missing or malformed."""

    exit_code = ExitCode.CONFIG_ERROR


class WarningsAsErrorsError(XmlDocHelpError):
    """Warnings were reported while warnings are treated as errors."""

    exit_code = ExitCode.WARNINGS_AS_ERRORS


class UnsupportedDescriptorError(TypeError):
    """The encoder was given an object outside the descriptor model."""

    def __init__(self, descriptor: object) -> None:
        """Record the offending descriptor."""
        super().__init__(
            f"Unsupported descriptor: {type(descriptor).__name__} ({descriptor!r})"
        )
        self.descriptor = descriptor
