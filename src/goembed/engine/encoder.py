# src/goembed/engine/encoder.py
"""Stream encoder: turn one input stream into Go byte-slice declarations.

Output for an input named "logo.png" with SHA1 enabled:

    // logo.png
    var logo_png = []byte{
        0x89, 0x50, 0x4e, 0x47, ...,
    }

    // SHA1 hash of logo.png
    var logo_png_SHA1 = []byte{
        0x..., (12 entries)
        0x..., (8 entries)
    }

The encoder never opens or closes the streams it is given. The only resource
it owns is the compressor, which is finalized exactly once on every path.
"""

from __future__ import annotations

from typing import BinaryIO

from goembed.contracts import ByteSink, EmbedResult, EncodeOptions, SinkWriteError, SourceReadError
from goembed.core.identifiers import sanitise
from goembed.core.logging import get_logger
from goembed.engine.sinks import LINE_WIDTH, GzipSink, HashSink, LiteralSink, TeeSink

logger = get_logger(__name__)

# Bytes requested from the source per read
CHUNK_SIZE = LINE_WIDTH


def read_chunk(source: BinaryIO, size: int, *, name: str) -> bytes:
    """Read up to `size` bytes, looping over short reads.

    Returns fewer than `size` bytes only at end of stream. A stream that
    ends abruptly (EOFError, e.g. a truncated gzip file) is treated as a
    normal end of stream.

    Raises:
        SourceReadError: On any other read failure
    """
    buf = bytearray()
    while len(buf) < size:
        try:
            block = source.read(size - len(buf))
        except EOFError:
            break
        except OSError as e:
            raise SourceReadError(name, f"failed to read input: {e}") from e
        if not block:
            break
        buf += block
    return bytes(buf)


def _write_text(dst: BinaryIO, text: str, *, name: str) -> None:
    try:
        dst.write(text.encode("utf-8"))
    except OSError as e:
        raise SinkWriteError(name, f"failed to write output: {e}") from e


def _pump(source: BinaryIO, sink: ByteSink, *, name: str) -> int:
    """Copy the source into the sink in fixed-size chunks; return bytes read."""
    total = 0
    while True:
        chunk = read_chunk(source, CHUNK_SIZE, name=name)
        if not chunk:
            break
        sink.write(chunk)
        total += len(chunk)
        if len(chunk) < CHUNK_SIZE:
            break
    return total


def _pump_compressed(source: BinaryIO, compressor: GzipSink, *, name: str) -> int:
    """Pump through the compressor and finalize it exactly once.

    If pumping fails, that error wins; a finalization failure on the same
    path is attached to it as a note instead of replacing it.
    """
    try:
        total = _pump(source, compressor, name=name)
    except Exception as exc:
        try:
            compressor.finalize()
        except Exception as fin:
            exc.add_note(f"compressor finalization also failed: {fin}")
        raise
    compressor.finalize()
    return total


def encode(dst: BinaryIO, source: BinaryIO, name: str, options: EncodeOptions | None = None) -> EmbedResult:
    """Embed one input stream as Go declarations.

    Args:
        dst: Writable binary output stream (caller-owned, not closed)
        source: Readable binary input stream (caller-owned, not closed)
        name: Original input name, used in comments and for the identifier
        options: Compression/hash options; defaults to neither

    Returns:
        EmbedResult describing what was written

    Raises:
        SourceReadError: Reading the input failed
        SinkWriteError: Writing the output failed (partial output is kept)
        FinalizationError: The compressor could not be flushed
    """
    options = options or EncodeOptions()
    identifier = sanitise(name)

    _write_text(dst, f"\n// {name}\nvar {identifier} = []byte{{\n", name=name)

    literal = LiteralSink(dst, name=name)
    hasher = HashSink("sha1") if options.sha1 else None
    tail: ByteSink = TeeSink(literal, hasher) if hasher is not None else literal

    if options.compress:
        bytes_read = _pump_compressed(source, GzipSink(tail, name=name), name=name)
    else:
        bytes_read = _pump(source, tail, name=name)

    tail.finalize()
    _write_text(dst, "}\n", name=name)

    digest = None
    if hasher is not None:
        digest = hasher.digest()
        _write_text(dst, f"\n// SHA1 hash of {name}\nvar {identifier}_SHA1 = []byte{{\n", name=name)
        digest_literal = LiteralSink(dst, name=name)
        digest_literal.write(digest)
        digest_literal.finalize()
        _write_text(dst, "}\n", name=name)

    logger.debug(
        "input_encoded",
        name=name,
        identifier=identifier,
        bytes_read=bytes_read,
        bytes_emitted=literal.bytes_emitted,
        compressed=options.compress,
    )
    return EmbedResult(
        name=name,
        identifier=identifier,
        bytes_read=bytes_read,
        bytes_emitted=literal.bytes_emitted,
        digest=digest,
    )
