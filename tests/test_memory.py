import pytest

from sigtalk.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset

SAMPLE = b"123456789"


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(SAMPLE)
    result = memset(buf, ord("a"), 5)
    assert result is buf
    assert buf[:5] == b"a" * 5
    assert buf[5:] == SAMPLE[5:]


def test_memset_truncates_value_to_byte():
    buf = bytearray(SAMPLE)
    memset(buf, ord("A") + 256, 2)
    assert buf[:2] == bytes([ord("A")]) * 2
    assert len(buf) == len(SAMPLE)


def test_memset_zero_length_leaves_buffer():
    buf = bytearray(SAMPLE)
    memset(buf, ord("z"), 0)
    assert buf == SAMPLE


def test_memset_too_long_raises():
    with pytest.raises(ValueError):
        memset(bytearray(3), 0, 4)


def test_bzero_clears_prefix_only():
    buf = bytearray(SAMPLE)
    bzero(buf, 5)
    assert buf[:5] == bytes(5)
    assert buf[5:] == SAMPLE[5:]


def test_calloc_is_zeroed_with_requested_size():
    buf = calloc(5, 4)
    assert len(buf) == 5 * 4
    assert not any(buf)


@pytest.mark.parametrize("count,size", [(0, 4), (3, 0), (0, 0)])
def test_calloc_empty_request_gives_one_byte(count, size):
    assert calloc(count, size) == bytearray(1)


def test_calloc_overflow_raises():
    with pytest.raises(OverflowError):
        calloc(2**40, 2**40)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memcpy_copies_prefix():
    dst = bytearray(SAMPLE)
    result = memcpy(dst, b"abc", 3)
    assert result is dst
    assert dst[:3] == b"abc"
    assert dst[3:] == SAMPLE[3:]


def test_memcpy_length_beyond_source_raises():
    with pytest.raises(ValueError):
        memcpy(bytearray(SAMPLE), b"abc", 5)


def test_memmove_overlapping_forward():
    buf = bytearray(SAMPLE)
    memmove(buf, 2, 0, 7)
    assert buf[2:] == SAMPLE[:7]
    assert buf[:2] == SAMPLE[:2]


def test_memmove_overlapping_backward():
    buf = bytearray(SAMPLE)
    memmove(buf, 0, 2, 7)
    assert buf[:7] == SAMPLE[2:]
    assert buf[7:] == SAMPLE[7:]


def test_memmove_same_offset_or_zero_length_is_noop():
    buf = bytearray(SAMPLE)
    memmove(buf, 3, 3, 4)
    memmove(buf, 0, 5, 0)
    assert buf == SAMPLE


def test_memmove_out_of_range_raises():
    with pytest.raises(ValueError):
        memmove(bytearray(SAMPLE), 5, 0, 7)


HELLO = b"Hello, World!"


def test_memchr_not_within_length():
    assert memchr(HELLO, ord("W"), 5) is None


def test_memchr_finds_first_occurrence():
    index = memchr(HELLO, ord("W"), 10)
    assert index == HELLO.index(b"W")
    assert memchr(HELLO, ord("H"), len(HELLO)) == 0


def test_memchr_value_is_taken_as_byte():
    assert memchr(HELLO, ord("W") + 256, 10) == memchr(HELLO, ord("W"), 10)


def test_memchr_zero_length():
    assert memchr(HELLO, ord("H"), 0) is None


def test_memcmp_equal_prefix():
    assert memcmp(HELLO, b"Hello, Wold!", 5) == 0
    assert memcmp(HELLO, b"Hello, Wold!", 0) == 0


def test_memcmp_reports_byte_difference():
    first, second = HELLO, b"Hello, Wold!"
    assert memcmp(first, second, 10) == ord("r") - ord("l")
    assert memcmp(second, first, 10) == -memcmp(first, second, 10)


def test_memcmp_too_long_raises():
    with pytest.raises(ValueError):
        memcmp(b"", HELLO, 5)