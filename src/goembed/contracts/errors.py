# src/goembed/contracts/errors.py
"""Embedding error hierarchy.

Every failure surfaced by the encoder or orchestrator is an EmbedError
subclass carrying the name of the stream it concerns. The underlying
exception (OSError, zlib.error, ...) is always chained via ``raise ... from``.

None of these are retried or logged where they are raised. Reporting is
the caller's job (the CLI prints them to stderr).
"""


class EmbedError(Exception):
    """Base class for all goembed errors.

    Attributes:
        name: Input or output name the failure relates to
        message: Human-readable error description
    """

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        self.message = message
        super().__init__(f"{name}: {message}")


class SourceReadError(EmbedError):
    """Raised when reading the input stream fails.

    End of stream, including a truncated stream that raises EOFError,
    is NOT an error and never produces this exception.
    """


class SinkWriteError(EmbedError):
    """Raised when writing generated source to the output stream fails."""


class FinalizationError(EmbedError):
    """Raised when the compressor cannot be flushed or closed."""


class PackageDetectionError(EmbedError):
    """Raised when the Go package name cannot be determined from a directory."""
