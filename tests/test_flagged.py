import io

import pytest

from lazyendian.enum import Endianess
from lazyendian.exceptions import MagicException, PackException, ShortReadException
from lazyendian.flagged import (
    endianess_from_flag,
    flag_from_endianess,
    read_flagged,
    write_flagged,
)
from lazyendian.scalars import U8, I16, U32, F32


class Pipe(io.RawIOBase):
    """Non seekable source: what is read is gone."""

    def __init__(self, data):
        self.data = data

    def readable(self):
        return True

    def read(self, n=-1):
        n = len(self.data) if n < 0 else n
        chunk, self.data = self.data[:n], self.data[n:]
        return chunk


def test_flags():
    assert endianess_from_flag(0) is Endianess.LITTLE_ENDIAN
    assert endianess_from_flag(1) is Endianess.BIG_ENDIAN
    assert flag_from_endianess(Endianess.BIG_ENDIAN) == 1
    assert flag_from_endianess(Endianess.LITTLE_ENDIAN) == 0

    with pytest.raises(MagicException):
        endianess_from_flag(2)


def test_flag_native(monkeypatch):
    monkeypatch.setattr('lazyendian.enum.get_native_endianess', lambda: Endianess.BIG_ENDIAN)

    assert flag_from_endianess(Endianess.NATIVE) == 1


def test_read_flagged():
    endianess, values = read_flagged(b'\x01\x00\x00\x00\x02\x00\x00\x01\x00', U32)

    assert endianess is Endianess.BIG_ENDIAN
    assert values == [2, 0x100]

    endianess, values = read_flagged(b'\x00\x02\x00\x00\x00', U32)

    assert endianess is Endianess.LITTLE_ENDIAN
    assert values == [2]


def test_read_flagged_count():
    source = io.BytesIO(b'\x01\xff\xfe\x00\x01\xaa')

    endianess, values = read_flagged(source, I16, count=2)

    assert values == [-2, 1]
    assert source.read() == b'\xaa'


def test_read_flagged_errors():
    with pytest.raises(ShortReadException):
        read_flagged(b'', U32)

    with pytest.raises(ShortReadException):
        read_flagged(b'\x00\x01\x02', U32)

    with pytest.raises(ShortReadException):
        read_flagged(b'\x00\x01\x00\x00\x00', U32, count=2)

    with pytest.raises(MagicException):
        read_flagged(b'\x07\x00\x00\x00\x00', U32)


@pytest.mark.parametrize('endianess,expected', [
    (Endianess.BIG_ENDIAN, b'\x01\x00\x00\x00\x02\xde\xad\xbe\xef'),
    (Endianess.LITTLE_ENDIAN, b'\x00\x02\x00\x00\x00\xef\xbe\xad\xde'),
])
def test_write_flagged(endianess, expected):
    sink = io.BytesIO()

    written = write_flagged(sink, endianess, U32, [2, 0xdeadbeef])

    assert written == len(expected)
    assert sink.getvalue() == expected

    assert read_flagged(sink.getvalue(), U32) == (endianess, [2, 0xdeadbeef])


def test_write_flagged_floats(tmp_path):
    path = tmp_path / 'floats.bin'

    with open(path, 'wb') as f:
        write_flagged(f, Endianess.BIG_ENDIAN, F32, [1.5, -2.0])

    assert path.read_bytes() == b'\x01\x3f\xc0\x00\x00\xc0\x00\x00\x00'

    with open(path, 'rb') as f:
        assert read_flagged(f, F32) == (Endianess.BIG_ENDIAN, [1.5, -2.0])


def test_write_flagged_out_of_range():
    with pytest.raises(PackException):
        write_flagged(io.BytesIO(), Endianess.BIG_ENDIAN, U8, [0x100])


def test_read_flagged_non_seekable():
    endianess, values = read_flagged(Pipe(b'\x01\x00\x00\x00\x02\x00\x00\x00\x03'), U32)

    assert endianess is Endianess.BIG_ENDIAN
    assert values == [2, 3]


def test_read_flagged_non_seekable_truncated():
    """Trailing bytes that don't make a whole value are not silently dropped."""
    with pytest.raises(ShortReadException) as e:
        read_flagged(Pipe(b'\x01\x00\x00\x00\x02\xaa\xbb'), U32)

    assert e.value.got == 2
    assert e.value.chain == ['values', '1']
