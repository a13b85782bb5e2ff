"""Encoding engine: transform-chain sinks, the stream encoder and the run orchestrator."""

from goembed.engine.encoder import encode
from goembed.engine.orchestrator import Orchestrator, RunResult, SkippedInput
from goembed.engine.sinks import GzipSink, HashSink, LiteralSink, TeeSink

__all__ = [
    "GzipSink",
    "HashSink",
    "LiteralSink",
    "Orchestrator",
    "RunResult",
    "SkippedInput",
    "TeeSink",
    "encode",
]
