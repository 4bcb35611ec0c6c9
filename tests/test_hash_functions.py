"""Tests for the string hash algorithms."""
import itertools
from concurrent.futures import ThreadPoolExecutor

import pytest

from hash_functions import (
    ALL_HASH_FUNCTIONS,
    HASH_FUNCTIONS,
    char_codes,
    get_hash_function,
    hash_ap,
    hash_bkdr,
    hash_dek,
    hash_djb,
    hash_djb2,
    hash_elf,
    hash_fnv,
    hash_js,
    hash_pjw,
    hash_rs,
    hash_sdbm,
)
from word_width import NATIVE_WORD, WORD_32, WORD_64

SEEDED = ['JS', 'DEK', 'FNV', 'DJB', 'DJB2']
WIDTHS = [WORD_32, WORD_64]


def test_registry_lists_every_algorithm_in_order():
    assert list(HASH_FUNCTIONS) == [
        'BKDR', 'SDBM', 'RS', 'AP', 'JS', 'DEK', 'FNV', 'DJB', 'DJB2', 'PJW', 'ELF',
    ]
    assert ALL_HASH_FUNCTIONS == list(HASH_FUNCTIONS.values())


def test_get_hash_function_is_case_insensitive():
    assert get_hash_function('djb2') is hash_djb2
    assert get_hash_function('Fnv') is hash_fnv


def test_get_hash_function_rejects_unknown_names():
    with pytest.raises(ValueError, match="Unknown hash algorithm 'MD5'"):
        get_hash_function('MD5')


@pytest.mark.parametrize("name", list(HASH_FUNCTIONS))
@pytest.mark.parametrize("width", WIDTHS)
def test_empty_input_hashes_to_zero(name, width):
    hash_func = HASH_FUNCTIONS[name]
    assert hash_func("", width=width) == 0
    assert hash_func(b"", width=width) == 0
    assert hash_func([], width=width) == 0


@pytest.mark.parametrize("name", SEEDED)
def test_seeded_algorithms_force_zero_for_leading_terminator(name):
    """A word that starts with the terminator is empty, not the seed."""
    hash_func = HASH_FUNCTIONS[name]
    assert hash_func("\0abc") == 0
    assert hash_func("abc", length=0) == 0


def test_concrete_vectors():
    assert hash_bkdr("") == 0
    assert hash_bkdr("a") == 97
    assert hash_bkdr("ab") == 97 * 131 + 98 == 12805
    assert hash_sdbm("a") == 97
    assert hash_sdbm("ab") == 97 * 65599 + 98
    assert hash_djb("") == 0
    assert hash_djb("a") == 5381 + (5381 << 5) + 97 == 177670
    assert hash_djb2("a") == (5381 * 33) ^ 97 == 177604
    assert hash_js("") == 0
    assert hash_rs("a") == 97
    assert hash_ap("a") == 97
    assert hash_pjw("a") == 97
    assert hash_elf("a") == 97


def test_fnv_matches_published_32_bit_value():
    assert hash_fnv("a", width=WORD_32) == 0x050C5D7E


def test_dek_32_bit_value():
    # (seed << 5) ^ (seed >> 27) ^ 'a', truncated to 32 bits
    assert hash_dek("a", width=WORD_32) == 0xCCF8D488


@pytest.mark.parametrize("width", WIDTHS)
def test_ap_odd_position_complement_wraps(width):
    assert hash_ap("ab", width=width) == width.mask - 198656


def test_pjw_and_elf_shift_by_one_eighth_of_the_word():
    assert hash_pjw("abc", width=WORD_32) == 0x6783
    assert hash_elf("abc", width=WORD_32) == 0x6783
    assert hash_pjw("abc", width=WORD_64) == 0x616263
    assert hash_elf("abc", width=WORD_64) == 0x616263


@pytest.mark.parametrize("hash_func", [hash_pjw, hash_elf])
@pytest.mark.parametrize("width", WIDTHS)
def test_pjw_and_elf_keep_high_bits_clear(hash_func, width):
    word = "the quick brown fox jumps over the lazy dog" * 3
    value = hash_func(word, width=width)
    assert value != 0
    assert value & width.high_bits_mask == 0


@pytest.mark.parametrize("width", WIDTHS)
def test_bkdr_wraps_modulo_word_width(width):
    word = "z" * 100
    exact = 0
    for char in word:
        exact = exact * 131 + ord(char)
    assert exact >= 2 ** width.bits
    assert hash_bkdr(word, width=width) == exact % (2 ** width.bits)


def test_djb_wraps_modulo_word_width():
    word = "overflowing" * 20
    exact = 5381
    for char in word:
        exact = exact * 33 + ord(char)
    assert hash_djb(word, width=WORD_32) == exact % 2 ** 32
    assert hash_djb(word, width=WORD_64) == exact % 2 ** 64


@pytest.mark.parametrize("name", list(HASH_FUNCTIONS))
@pytest.mark.parametrize("width", WIDTHS)
def test_results_fit_the_word(name, width):
    hash_func = HASH_FUNCTIONS[name]
    for word in ["a", "hello", "x" * 500, "￿" * 40]:
        assert 0 <= hash_func(word, width=width) <= width.mask


def test_long_inputs_depend_on_word_width():
    word = "word width changes long outputs" * 4
    assert hash_bkdr(word, width=WORD_32) != hash_bkdr(word, width=WORD_64)
    assert hash_bkdr(word, width=WORD_32) == hash_bkdr(word, width=WORD_64) % 2 ** 32


@pytest.mark.parametrize("name", list(HASH_FUNCTIONS))
def test_deterministic(name):
    hash_func = HASH_FUNCTIONS[name]
    assert hash_func("deterministic") == hash_func("deterministic")
    assert hash_func("deterministic") == hash_func(list(b"deterministic"))


def test_deterministic_across_threads():
    words = [f"word-{i}" for i in range(200)]
    expected = {name: [func(w) for w in words] for name, func in HASH_FUNCTIONS.items()}

    def run(name):
        return name, [HASH_FUNCTIONS[name](w) for w in words]

    with ThreadPoolExecutor(max_workers=8) as pool:
        for name, values in pool.map(run, list(HASH_FUNCTIONS) * 4):
            assert values == expected[name]


def test_algorithms_are_not_interchangeable():
    values = {name: func("hello world") for name, func in HASH_FUNCTIONS.items()}
    assert values['BKDR'] != values['SDBM']
    assert values['DJB'] != values['DJB2']
    # PJW and ELF fold identically; every other algorithm is distinct
    assert len(set(values.values())) == 10


class TestInput:
    def test_str_bytes_and_ints_agree(self):
        assert hash_bkdr("ab") == hash_bkdr(b"ab") == hash_bkdr([97, 98])
        assert hash_bkdr(bytearray(b"ab")) == hash_bkdr(memoryview(b"ab"))

    def test_wide_characters_hash_by_code_point(self):
        assert hash_bkdr("é") == 233
        assert hash_bkdr("中") == 0x4E2D
        assert hash_bkdr("中") == hash_bkdr([0x4E2D])
        # Encoding is the caller's choice
        assert hash_bkdr("é") != hash_bkdr("é".encode("utf-8"))

    def test_zero_terminates_the_word(self):
        assert hash_bkdr("ab\0cd") == hash_bkdr("ab")
        assert hash_fnv(b"ab\x00cd") == hash_fnv(b"ab")
        assert char_codes("ab\0cd") == [97, 98]

    def test_nothing_after_the_terminator_is_read(self):
        assert hash_bkdr([97, 0, -1]) == 97
        assert hash_bkdr([97, 0, "x"]) == 97
        elements = iter([97, 98, 0, 99])
        assert hash_sdbm(elements) == hash_sdbm("ab")
        assert next(elements) == 99

    def test_endless_input_stops_at_the_terminator(self):
        endless = itertools.chain(b"ab", itertools.repeat(0))
        assert hash_js(endless) == hash_js(b"ab")

    def test_length_reads_only_that_many_elements(self):
        assert hash_bkdr(itertools.repeat(97), length=3) == hash_bkdr("aaa")
        assert hash_djb([97, 98, -1], length=2) == hash_djb("ab")

    def test_length_hashes_exactly_that_many_elements(self):
        assert hash_bkdr("abcdef", length=2) == hash_bkdr("ab")
        assert hash_bkdr("ab\0cd", length=5, width=WORD_64) == ((97 * 131 + 98) * 131 ** 3 + 99 * 131 + 100)
        assert char_codes("ab\0cd", length=5) == [97, 98, 0, 99, 100]

    def test_length_past_end_is_rejected(self):
        with pytest.raises(ValueError, match="exceeds input"):
            hash_djb("abc", length=4)

    def test_negative_length_is_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            char_codes("abc", length=-1)

    def test_negative_elements_are_rejected(self):
        with pytest.raises(ValueError, match="unsigned"):
            hash_sdbm([97, -1])

    def test_non_integer_elements_are_rejected(self):
        with pytest.raises(TypeError, match="must be integers"):
            hash_sdbm(["a", "b"])

    def test_bool_elements_are_rejected(self):
        with pytest.raises(TypeError, match="got bool"):
            hash_bkdr([True, False])

    def test_default_width_is_native(self):
        word = "native" * 30
        assert hash_rs(word) == hash_rs(word, width=NATIVE_WORD)
