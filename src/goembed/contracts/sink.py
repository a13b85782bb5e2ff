# src/goembed/contracts/sink.py
"""Byte sink protocol shared by the encoder and its transform chain.

Plain renderers, compressors, hashers and fan-out sinks all implement the
same two-method capability, so the encoder can stack them without knowing
which concrete sinks are present.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ByteSink(Protocol):
    """Destination for a stream of bytes.

    Lifecycle:
    1. write(data) - Called zero or more times
    2. finalize() - Called exactly once, pushes buffered bytes downstream

    finalize() must never close a caller-owned stream.
    """

    def write(self, data: bytes) -> None:
        """Accept a block of bytes."""
        ...

    def finalize(self) -> None:
        """Flush any buffered state into the downstream destination."""
        ...
