"""
Machine word width parameters for string hashing.

SPDX-License-Identifier: BSD-3-Clause
"""
import struct
from dataclasses import dataclass


@dataclass(frozen=True)
class WordWidth:
    """Immutable unsigned word width that all hash arithmetic wraps at."""

    bits: int = 64

    def __post_init__(self):
        if not isinstance(self.bits, int) or self.bits <= 0 or self.bits % 8:
            raise ValueError(f"Word width must be a positive multiple of 8 bits, got {self.bits!r}")

    @property
    def mask(self) -> int:
        """All-ones value of the word (2**bits - 1)."""
        return (1 << self.bits) - 1

    @property
    def one_eighth(self) -> int:
        """PJW/ELF shift applied per character."""
        return self.bits // 8

    @property
    def three_quarters(self) -> int:
        """PJW/ELF shift that folds high bits back into the low range."""
        return (self.bits * 3) // 4

    @property
    def high_bits_mask(self) -> int:
        """Top one-eighth of the word, as all-ones shifted left."""
        return (self.mask << (self.bits - self.one_eighth)) & self.mask

    def print_summary(self):
        """Print word width summary."""
        print("=" * 80)
        print(f"WORD WIDTH: {self.bits} bits")
        print("=" * 80)
        print(f"Mask: 0x{self.mask:X}")
        print(f"PJW/ELF shift (one eighth): {self.one_eighth}")
        print(f"PJW/ELF fold (three quarters): {self.three_quarters}")
        print(f"High bits mask: 0x{self.high_bits_mask:X}")
        print("=" * 80)
        print()


WORD_32 = WordWidth(32)
WORD_64 = WordWidth(64)

# Width of a native pointer, the size_t of the running interpreter
NATIVE_WORD = WordWidth(struct.calcsize('P') * 8)
