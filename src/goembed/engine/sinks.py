# src/goembed/engine/sinks.py
"""Byte sinks that make up the encoder's transform chain.

The chain is always assembled in this order:

    source bytes -> [GzipSink] -> TeeSink(LiteralSink, HashSink)

so the hasher observes exactly the bytes rendered into the literal
(compressed bytes when compression is on, raw bytes otherwise).
"""

from __future__ import annotations

import hashlib
import zlib
from typing import BinaryIO

from goembed.contracts import ByteSink, FinalizationError, SinkWriteError

# Bytes rendered per literal line
LINE_WIDTH = 12

# zlib window bits selecting a gzip container (header + CRC32 trailer)
_GZIP_WBITS = 16 + zlib.MAX_WBITS


def format_line(chunk: bytes) -> str:
    """Render one literal line: tab indent, hex entries, trailing comma.

    Go requires the trailing comma because the closing brace sits on the
    next line.
    """
    return "\t" + ", ".join(f"0x{b:02x}" for b in chunk) + ",\n"


class LiteralSink:
    """Render bytes as Go hex-literal lines into a binary output stream.

    Bytes are buffered until a full line is available; finalize() emits the
    trailing partial line. The output stream is caller-owned and never closed.

    Attributes:
        bytes_emitted: Number of byte entries rendered so far
    """

    def __init__(self, dst: BinaryIO, *, name: str = "<output>", width: int = LINE_WIDTH) -> None:
        if width <= 0:
            raise ValueError(f"width must be positive, got {width}")
        self._dst = dst
        self._name = name
        self._width = width
        self._pending = bytearray()
        self.bytes_emitted = 0

    def write(self, data: bytes) -> None:
        self._pending += data
        full = len(self._pending) - len(self._pending) % self._width
        if full:
            lines = [format_line(self._pending[i : i + self._width]) for i in range(0, full, self._width)]
            del self._pending[:full]
            self._emit("".join(lines), full)

    def finalize(self) -> None:
        if self._pending:
            count = len(self._pending)
            line = format_line(self._pending)
            self._pending.clear()
            self._emit(line, count)

    def _emit(self, text: str, count: int) -> None:
        try:
            self._dst.write(text.encode("ascii"))
        except OSError as e:
            raise SinkWriteError(self._name, f"failed to write data: {e}") from e
        self.bytes_emitted += count


class HashSink:
    """Accumulate a digest over every byte written."""

    def __init__(self, algorithm: str = "sha1") -> None:
        self._hasher = hashlib.new(algorithm)

    @property
    def algorithm(self) -> str:
        return self._hasher.name

    def write(self, data: bytes) -> None:
        self._hasher.update(data)

    def finalize(self) -> None:
        pass

    def digest(self) -> bytes:
        """Raw digest of everything written so far."""
        return self._hasher.digest()


class TeeSink:
    """Forward each write, then finalize(), to several sinks in order."""

    def __init__(self, *sinks: ByteSink) -> None:
        self._sinks = sinks

    def write(self, data: bytes) -> None:
        for sink in self._sinks:
            sink.write(data)

    def finalize(self) -> None:
        for sink in self._sinks:
            sink.finalize()


class GzipSink:
    """Gzip-compress bytes before passing them downstream.

    Output is deterministic: the gzip header carries no timestamp or file
    name. finalize() writes the remaining compressed data and the trailer,
    and may be called only once. It does not finalize the downstream sink;
    the encoder owns that ordering.
    """

    def __init__(self, downstream: ByteSink, *, name: str = "<output>", level: int = zlib.Z_BEST_COMPRESSION) -> None:
        self._downstream = downstream
        self._name = name
        self._compressor = zlib.compressobj(level, zlib.DEFLATED, _GZIP_WBITS)
        self._finalized = False

    @property
    def finalized(self) -> bool:
        return self._finalized

    def write(self, data: bytes) -> None:
        if self._finalized:
            raise FinalizationError(self._name, "write after compressor was finalized")
        try:
            compressed = self._compressor.compress(data)
        except zlib.error as e:
            raise SinkWriteError(self._name, f"compression failed: {e}") from e
        if compressed:
            self._downstream.write(compressed)

    def finalize(self) -> None:
        if self._finalized:
            raise FinalizationError(self._name, "compressor already finalized")
        self._finalized = True
        try:
            tail = self._compressor.flush(zlib.Z_FINISH)
            self._downstream.write(tail)
        except (zlib.error, SinkWriteError) as e:
            raise FinalizationError(self._name, f"failed to finalize compressor: {e}") from e
