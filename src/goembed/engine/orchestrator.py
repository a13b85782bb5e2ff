# src/goembed/engine/orchestrator.py
"""Run the encoder over a list of input files.

Two output modes:
- Shared output (settings.output set): one file, one preamble, every input
  appended in order. Any embed failure aborts the whole run.
- Per-file output: "<basename>.go" in the working directory for each input.

Inputs that can't be opened (or whose per-file output can't be created) are
skipped and recorded; everything else that fails aborts the run.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO

from goembed.contracts import EmbedResult, SinkWriteError
from goembed.core.config import EmbedSettings
from goembed.core.identifiers import sanitise
from goembed.core.logging import get_logger
from goembed.core.package import detect_package, write_package
from goembed.engine.encoder import encode

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class SkippedInput:
    """An input that was not embedded, with the reason."""

    name: str
    reason: str


@dataclass
class RunResult:
    """Summary of an orchestrator run.

    Attributes:
        package: Go package name written to every output
        outputs: Output files written, in order of creation
        embedded: One EmbedResult per successfully embedded input
        skipped: Inputs skipped because they (or their output) couldn't be opened
    """

    package: str
    outputs: list[Path] = field(default_factory=list)
    embedded: list[EmbedResult] = field(default_factory=list)
    skipped: list[SkippedInput] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.skipped


def resolve_package(settings: EmbedSettings) -> str:
    """Explicit package (sanitised) or the one detected next to the output.

    Raises:
        PackageDetectionError: If no package is configured and none can be detected
    """
    if settings.package is not None:
        return sanitise(settings.package)
    directory = settings.output.parent if settings.output is not None else Path(".")
    return detect_package(directory)


def per_file_output(name: str) -> Path:
    """Output path for an input in per-file mode: basename + ".go" in the working directory."""
    return Path(Path(name).name + ".go")


class Orchestrator:
    """Embed a sequence of input files according to EmbedSettings.

    Args:
        settings: Resolved run settings
        on_skip: Called with each SkippedInput as soon as the input is skipped
    """

    def __init__(self, settings: EmbedSettings, *, on_skip: Callable[[SkippedInput], None] | None = None) -> None:
        self._settings = settings
        self._options = settings.to_encode_options()
        self._on_skip = on_skip

    def run(self, files: Iterable[str]) -> RunResult:
        """Embed each file in turn.

        Raises:
            PackageDetectionError: Package name could not be determined
            EmbedError: A preamble or embed step failed; the run stops there
            OSError: The shared output file could not be created
        """
        result = RunResult(package=resolve_package(self._settings))
        log = logger.bind(package=result.package)

        if self._settings.output is not None:
            output = self._settings.output
            with open(output, "wb") as dst:
                result.outputs.append(output)
                write_package(dst, result.package, name=str(output))
                for name in files:
                    self._embed_into(dst, name, result)
            log.info("run_completed", output=str(output), embedded=len(result.embedded), skipped=len(result.skipped))
            return result

        for name in files:
            output = per_file_output(name)
            try:
                source = open(name, "rb")
            except OSError as e:
                self._skip(result, name, str(e))
                continue
            with source:
                try:
                    dst = open(output, "wb")
                except OSError as e:
                    self._skip(result, name, f"cannot create {output}: {e}")
                    continue
                with dst:
                    result.outputs.append(output)
                    write_package(dst, result.package, name=str(output))
                    self._encode(dst, source, name, result)

        log.info("run_completed", embedded=len(result.embedded), skipped=len(result.skipped))
        return result

    def _embed_into(self, dst: BinaryIO, name: str, result: RunResult) -> None:
        try:
            source = open(name, "rb")
        except OSError as e:
            self._skip(result, name, str(e))
            return
        with source:
            self._encode(dst, source, name, result)

    def _encode(self, dst: BinaryIO, source: BinaryIO, name: str, result: RunResult) -> None:
        embedded = encode(dst, source, name, self._options)
        try:
            dst.flush()
        except OSError as e:
            raise SinkWriteError(name, f"failed to flush output: {e}") from e
        result.embedded.append(embedded)
        logger.info(
            "input_embedded",
            name=name,
            identifier=embedded.identifier,
            bytes_read=embedded.bytes_read,
            bytes_emitted=embedded.bytes_emitted,
        )

    def _skip(self, result: RunResult, name: str, reason: str) -> None:
        skipped = SkippedInput(name=name, reason=reason)
        result.skipped.append(skipped)
        logger.info("input_skipped", name=name, reason=reason)
        if self._on_skip is not None:
            self._on_skip(skipped)
