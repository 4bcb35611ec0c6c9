"""
String hash function implementations for hash-table containers.

Every function takes a word (str, bytes, or an iterable of unsigned ints),
stops at the first zero element, and returns an unsigned integer wrapped to
the given word width. Pass ``length`` to hash exactly that many elements
instead of scanning for the zero terminator.

SPDX-License-Identifier: BSD-3-Clause
"""
import itertools
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Union
from word_width import NATIVE_WORD, WordWidth

Word = Union[str, bytes, Iterable[int]]


def _elements(word: Word) -> Iterator[int]:
    """Yield validated element values, reading no further than asked."""
    codes = map(ord, word) if isinstance(word, str) else iter(word)
    for ch in codes:
        if not isinstance(ch, int) or isinstance(ch, bool):
            raise TypeError(f"Hash input elements must be integers, got {type(ch).__name__}")
        if ch < 0:
            raise ValueError(f"Hash input elements must be unsigned, got {ch}")
        yield ch


def char_codes(word: Word, length: Optional[int] = None) -> List[int]:
    """Convert a word to its list of element values."""
    if length is None:
        # Zero is the terminator; nothing after it is read
        return list(itertools.takewhile(bool, _elements(word)))

    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    elements = list(itertools.islice(_elements(word), length))
    if len(elements) < length:
        raise ValueError(f"length {length} exceeds input of {len(elements)} elements")
    return elements


def hash_bkdr(word: Word, length: Optional[int] = None, width: WordWidth = NATIVE_WORD) -> int:
    """BKDR hash (Kernighan & Ritchie), multiplier 131."""
    mask = width.mask
    hash_val = 0
    for ch in char_codes(word, length):
        hash_val = (hash_val * 131 + ch) & mask
    return hash_val


def hash_sdbm(word: Word, length: Optional[int] = None, width: WordWidth = NATIVE_WORD) -> int:
    """SDBM hash, same shape as BKDR with multiplier 65599."""
    mask = width.mask
    hash_val = 0
    for ch in char_codes(word, length):
        hash_val = (hash_val * 65599 + ch) & mask
    return hash_val


def hash_rs(word: Word, length: Optional[int] = None, width: WordWidth = NATIVE_WORD) -> int:
    """RS hash (Sedgewick), with a multiplier that evolves per character."""
    mask = width.mask
    hash_val = 0
    magic = 63689
    for ch in char_codes(word, length):
        hash_val = (hash_val * magic + ch) & mask
        magic = (magic * 378551) & mask
    return hash_val


def hash_ap(word: Word, length: Optional[int] = None, width: WordWidth = NATIVE_WORD) -> int:
    """AP hash (Arash Partow), alternating mix on even and odd positions."""
    mask = width.mask
    hash_val = 0
    for i, ch in enumerate(char_codes(word, length)):
        if (i & 1) == 0:
            hash_val ^= (hash_val << 7) ^ ch ^ (hash_val >> 3)
        else:
            hash_val ^= ~((hash_val << 11) ^ ch ^ (hash_val >> 5))
        hash_val &= mask
    return hash_val


# Seeded algorithms return 0 for an empty word rather than their seed
def hash_js(word: Word, length: Optional[int] = None, width: WordWidth = NATIVE_WORD) -> int:
    """JS hash (Justin Sobel)."""
    codes = char_codes(word, length)
    if not codes:
        return 0
    mask = width.mask
    hash_val = 1315423911 & mask
    for ch in codes:
        hash_val = (hash_val ^ ((hash_val << 5) + ch + (hash_val >> 2))) & mask
    return hash_val


def hash_dek(word: Word, length: Optional[int] = None, width: WordWidth = NATIVE_WORD) -> int:
    """DEK hash (Knuth, TAOCP vol. 3).

    The right shift stays at 27 for every width.
    """
    codes = char_codes(word, length)
    if not codes:
        return 0
    mask = width.mask
    hash_val = 1315423911 & mask
    for ch in codes:
        hash_val = (((hash_val << 5) ^ (hash_val >> 27)) ^ ch) & mask
    return hash_val


def hash_fnv(word: Word, length: Optional[int] = None, width: WordWidth = NATIVE_WORD) -> int:
    """FNV-1 hash: multiply by the 32-bit FNV prime, then XOR."""
    codes = char_codes(word, length)
    if not codes:
        return 0
    mask = width.mask
    hash_val = 2166136261 & mask
    for ch in codes:
        hash_val = (hash_val * 16777619) & mask
        hash_val ^= ch & mask
    return hash_val


def hash_djb(word: Word, length: Optional[int] = None, width: WordWidth = NATIVE_WORD) -> int:
    """DJB hash (Daniel J. Bernstein), h * 33 + c."""
    codes = char_codes(word, length)
    if not codes:
        return 0
    mask = width.mask
    hash_val = 5381 & mask
    for ch in codes:
        hash_val = (hash_val + (hash_val << 5) + ch) & mask
    return hash_val


def hash_djb2(word: Word, length: Optional[int] = None, width: WordWidth = NATIVE_WORD) -> int:
    """DJB2 hash, the XOR variant h * 33 ^ c."""
    codes = char_codes(word, length)
    if not codes:
        return 0
    mask = width.mask
    hash_val = 5381 & mask
    for ch in codes:
        hash_val = ((hash_val * 33) ^ ch) & mask
    return hash_val


def hash_pjw(word: Word, length: Optional[int] = None, width: WordWidth = NATIVE_WORD) -> int:
    """PJW hash (Peter J. Weinberger).

    Shifts by one eighth of the word per character and folds any bits that
    reach the top eighth back down by three quarters of the word.
    """
    mask = width.mask
    high_bits = width.high_bits_mask
    one_eighth = width.one_eighth
    three_quarters = width.three_quarters
    hash_val = 0
    for ch in char_codes(word, length):
        hash_val = ((hash_val << one_eighth) + ch) & mask
        magic = hash_val & high_bits
        if magic:
            hash_val = (hash_val ^ (magic >> three_quarters)) & ~high_bits & mask
    return hash_val


def hash_elf(word: Word, length: Optional[int] = None, width: WordWidth = NATIVE_WORD) -> int:
    """ELF hash, the Unix object file variant of PJW."""
    mask = width.mask
    high_bits = width.high_bits_mask
    one_eighth = width.one_eighth
    three_quarters = width.three_quarters
    hash_val = 0
    for ch in char_codes(word, length):
        hash_val = ((hash_val << one_eighth) + ch) & mask
        magic = hash_val & high_bits
        if magic:
            hash_val ^= magic >> three_quarters
            hash_val &= ~magic
    return hash_val


HashFunction = Callable[..., int]

HASH_FUNCTIONS: Dict[str, HashFunction] = {
    'BKDR': hash_bkdr,
    'SDBM': hash_sdbm,
    'RS': hash_rs,
    'AP': hash_ap,
    'JS': hash_js,
    'DEK': hash_dek,
    'FNV': hash_fnv,
    'DJB': hash_djb,
    'DJB2': hash_djb2,
    'PJW': hash_pjw,
    'ELF': hash_elf,
}

ALL_HASH_FUNCTIONS = list(HASH_FUNCTIONS.values())


def get_hash_function(name: str) -> HashFunction:
    """Look up a hash function by algorithm name (case-insensitive)."""
    try:
        return HASH_FUNCTIONS[name.upper()]
    except KeyError:
        valid = ', '.join(HASH_FUNCTIONS)
        raise ValueError(f"Unknown hash algorithm {name!r}; choose one of: {valid}") from None
