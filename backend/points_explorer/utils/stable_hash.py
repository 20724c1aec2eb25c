"""FNV-1a 32-bit string hashing.

Python's builtin ``hash()`` is salted per process, so it cannot anchor
derived fields. ``stable_hash32`` folds each UTF-16 code unit of the input
(matching JavaScript ``charCodeAt``) into an FNV-1a state and always
returns the same unsigned 32-bit integer for the same string.

Example:
    >>> from points_explorer.utils.stable_hash import stable_hash32
    >>> hex(stable_hash32("a"))
    '0xe40c292c'
"""

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193
_UINT32_MASK = 0xFFFFFFFF


def _code_units(text: str) -> list[int]:
    """Return the UTF-16 code units of ``text``."""
    data = text.encode("utf-16-le", errors="surrogatepass")
    return [data[i] | (data[i + 1] << 8) for i in range(0, len(data), 2)]


def stable_hash32(text: str) -> int:
    """Hash a string with FNV-1a (32-bit).

    Args:
        text: Key to hash.

    Returns:
        Unsigned 32-bit hash value.
    """
    h = FNV_OFFSET_BASIS
    for unit in _code_units(text):
        h ^= unit
        h = (h * FNV_PRIME) & _UINT32_MASK
    return h
