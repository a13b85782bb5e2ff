"""Identifier sanitisation utilities.

Maps arbitrary file names onto valid Go identifiers. Lives in core/ so both
the encoder and the CLI (for --package) can use it without cross imports.
"""

from __future__ import annotations

from pathlib import PurePath

# Fallback when nothing of the base name survives
EMPTY_IDENTIFIER = "_"


def sanitise(name: str) -> str:
    """Derive a Go identifier from a file name.

    Only the base name is used. Letters are kept, decimal digits are kept
    once a letter has been accepted, and every other code point becomes a
    single underscore. Underscores are never coalesced.

    Args:
        name: File name or path, possibly containing non-ASCII characters

    Returns:
        Non-empty identifier; "_" if the base name is empty
    """
    out: list[str] = []
    first = True

    for char in PurePath(name).name:
        if char.isalpha():
            first = False
            out.append(char)
        elif not first and char.isdecimal():
            out.append(char)
        else:
            # Does not clear `first`: "123abc" -> "___abc"
            out.append("_")

    return "".join(out) or EMPTY_IDENTIFIER
