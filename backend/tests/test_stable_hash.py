"""Unit tests for FNV-1a hashing in points_explorer.utils.stable_hash.

See Also:
    - backend/points_explorer/utils/stable_hash.py for the implementation.
"""

from __future__ import annotations

from points_explorer.utils import stable_hash


def test_known_vectors() -> None:
    """Published FNV-1a 32-bit test vectors."""
    assert stable_hash.stable_hash32("") == 0x811C9DC5
    assert stable_hash.stable_hash32("a") == 0xE40C292C
    assert stable_hash.stable_hash32("foobar") == 0xBF9CF968


def test_seed_key_hashes() -> None:
    """Derivation keys hash to the reference values."""
    assert stable_hash.stable_hash32("1.000000,2.000000") == 0xDBEF0F4E
    assert stable_hash.stable_hash32("1.000000,2.000000|cat") == 0x17D2C73A
    assert stable_hash.stable_hash32("1.000000,2.000000|id") == 0xCBFB954B


def test_result_is_unsigned_32_bit() -> None:
    """Hashes never leave the unsigned 32-bit range."""
    for text in ("x", "-122.450000,37.780000", "é", "🙂" * 10):
        assert 0 <= stable_hash.stable_hash32(text) <= 0xFFFFFFFF


def test_hashes_utf16_code_units() -> None:
    """Characters outside the BMP hash as two surrogate code units."""
    assert stable_hash._code_units("🙂") == [0xD83D, 0xDE42]
    assert stable_hash._code_units("ab") == [0x61, 0x62]
