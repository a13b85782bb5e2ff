"""Shared contracts: sink protocol, option values and error types.

Consolidated here so engine and core modules can depend on them without
importing each other.
"""

from dataclasses import dataclass

from goembed.contracts.errors import (
    EmbedError,
    FinalizationError,
    PackageDetectionError,
    SinkWriteError,
    SourceReadError,
)
from goembed.contracts.sink import ByteSink

__all__ = [
    "ByteSink",
    "EmbedError",
    "EmbedResult",
    "EncodeOptions",
    "FinalizationError",
    "PackageDetectionError",
    "SinkWriteError",
    "SourceReadError",
]


@dataclass(frozen=True, slots=True)
class EncodeOptions:
    """Per-call encoder options.

    Attributes:
        compress: Gzip the data (best compression) before embedding it
        sha1: Also embed the SHA1 digest of the embedded bytes
    """

    compress: bool = False
    sha1: bool = False


@dataclass(frozen=True, slots=True)
class EmbedResult:
    """Outcome of embedding one input stream.

    Attributes:
        name: Original input name as given by the caller
        identifier: Sanitised Go identifier used for the declaration
        bytes_read: Number of bytes consumed from the source
        bytes_emitted: Number of byte entries written in the data literal
        digest: SHA1 digest of the emitted bytes, None unless requested
    """

    name: str
    identifier: str
    bytes_read: int
    bytes_emitted: int
    digest: bytes | None = None
