# tests/property/core/test_identifiers_properties.py
"""Property-based tests for identifier sanitisation.

Shape Properties:
- Output is never empty
- Output starts with a letter or underscore
- Output contains only letters, decimal digits and underscores
- One output character per code point of the base name

Rule Properties:
- Leading digits are always replaced
- Names with no letters sanitise to underscores only
- Directory components never influence the result
"""

from __future__ import annotations

import re
import string

from hypothesis import given
from hypothesis import strategies as st

from goembed.core.identifiers import sanitise
from tests.property.settings import DETERMINISM_SETTINGS, STANDARD_SETTINGS

# =============================================================================
# Strategies
# =============================================================================

# Base names: no separators, and not "." (which pathlib folds away)
base_names = st.text(
    alphabet=st.characters(exclude_categories=("Cs",), exclude_characters="/\x00"),
    min_size=1,
    max_size=40,
).filter(lambda s: s != ".")

ascii_names = st.text(alphabet=string.printable.replace("/", ""), min_size=1, max_size=40).filter(lambda s: s != ".")

digit_names = st.tuples(
    st.text(alphabet=string.digits, min_size=1, max_size=10),
    st.text(alphabet=string.digits, max_size=4),
).map(lambda parts: f"{parts[0]}.{parts[1]}" if parts[1] else parts[0])

symbol_names = st.text(alphabet="-+.,;:!@#$%^&*()[]{}<>?|~ ", min_size=1, max_size=20).filter(lambda s: s != ".")

directories = st.lists(st.text(alphabet=string.ascii_letters + string.digits + "-_.", min_size=1, max_size=8), max_size=4)

_ASCII_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


# =============================================================================
# Shape Properties
# =============================================================================


class TestSanitiseShapeProperties:
    @given(name=st.text(max_size=60))
    @DETERMINISM_SETTINGS
    def test_never_empty_and_deterministic(self, name: str) -> None:
        result = sanitise(name)
        assert result
        assert sanitise(name) == result

    @given(name=base_names)
    @STANDARD_SETTINGS
    def test_only_identifier_characters(self, name: str) -> None:
        result = sanitise(name)
        assert result[0].isalpha() or result[0] == "_"
        assert all(c.isalpha() or c.isdecimal() or c == "_" for c in result)

    @given(name=ascii_names)
    @STANDARD_SETTINGS
    def test_ascii_names_give_ascii_identifiers(self, name: str) -> None:
        assert _ASCII_IDENTIFIER.fullmatch(sanitise(name))

    @given(name=base_names)
    @STANDARD_SETTINGS
    def test_one_character_per_code_point(self, name: str) -> None:
        assert len(sanitise(name)) == len(name)


# =============================================================================
# Rule Properties
# =============================================================================


class TestSanitiseRuleProperties:
    @given(name=digit_names)
    @STANDARD_SETTINGS
    def test_all_digit_names_become_underscores(self, name: str) -> None:
        assert sanitise(name) == "_" * len(name)

    @given(name=symbol_names)
    @STANDARD_SETTINGS
    def test_symbol_only_names_become_underscores(self, name: str) -> None:
        assert set(sanitise(name)) == {"_"}

    @given(prefix=st.text(alphabet=string.digits + "_-", max_size=6), word=st.from_regex(r"[A-Za-z][A-Za-z0-9]{0,8}", fullmatch=True))
    @STANDARD_SETTINGS
    def test_digits_kept_only_after_a_letter(self, prefix: str, word: str) -> None:
        assert sanitise(prefix + word) == "_" * len(prefix) + word

    @given(parts=directories, name=base_names)
    @STANDARD_SETTINGS
    def test_directory_components_ignored(self, parts: list[str], name: str) -> None:
        path = "/".join([*parts, name])
        assert sanitise(path) == sanitise(name)
