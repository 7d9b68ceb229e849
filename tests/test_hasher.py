import pytest

from intercast.hasher import FastHasher, fast_hash


def test_empty_input_hashes_to_zero():
    assert fast_hash(b"") == 0


def test_single_byte_is_folded_directly():
    assert fast_hash(b"\x07") == 7


def test_full_word_uses_big_endian_fold():
    assert fast_hash(b"\x00" * 7 + b"\x01") == 1


def test_leading_zero_word_does_not_change_tail():
    assert fast_hash(b"\x00" * 8 + b"\x05") == fast_hash(b"\x05")


def test_symmetric_words_cancel_out():
    assert fast_hash(b"\x01" * 16) == fast_hash(b"")


def test_writing_same_short_data_twice_cancels():
    hasher = FastHasher()
    hasher.write(b"abc")
    hasher.write(b"abc")
    assert hasher.finish() == fast_hash(b"")


def test_fast_hash_matches_hasher():
    data = b"some longer input spanning several words"
    hasher = FastHasher()
    hasher.write(data)
    assert hasher.finish() == fast_hash(data)


def test_result_fits_in_64_bits():
    value = fast_hash(bytes(range(256)) * 3)
    assert 0 <= value < 2**64


def test_finish_does_not_reset():
    hasher = FastHasher()
    hasher.write(b"xyz")
    first = hasher.finish()
    assert hasher.finish() == first
    assert first == fast_hash(b"xyz")


def test_accepts_bytearray_and_memoryview():
    data = b"0123456789abcdef!"
    assert fast_hash(bytearray(data)) == fast_hash(data)
    assert fast_hash(memoryview(data)) == fast_hash(data)


def test_rejects_text():
    with pytest.raises(TypeError):
        fast_hash("text")