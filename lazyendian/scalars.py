"""
A TaggedScalar is a fixed width number together with the byte order its bits
are asserted to be in. The bits are stored as they are, the conversion
happens only when the value is cast to a given order.

Only a closed set of scalars qualifies, each one bound to the format
character the struct module uses for it:

    U8/I8    'B'/'b'
    U16/I16  'H'/'h'
    U32/I32  'I'/'i'
    U64/I64  'Q'/'q'
    F32/F64  'f'/'d'
"""
import logging
import struct
from typing import Dict, Optional, Type

from bitstring import BitArray, Bits

from .enum import Endianess
from .exceptions import (
    PackException,
    ShortReadException,
    UnknownArchitectureException,
    UnsupportedScalarException,
)
from .streams import Stream


logger = logging.getLogger(__name__)


class TaggedScalar(object):
    """Base class to subclass from: a subclass must indicate the struct format
    of the scalar it represents."""

    __slots__ = ('_bits', '_endianess')

    format: Optional[str] = None

    def __init__(self, value, endianess=Endianess.NATIVE):
        self._init(self._pack(value), endianess)

    def _init(self, raw: bytes, endianess: Endianess) -> None:
        if self.format is None:
            raise UnsupportedScalarException(chain=[self.__class__.__name__])

        if not isinstance(endianess, Endianess):
            raise TypeError(f'endianess must be an Endianess, not {endianess.__class__.__name__}')

        if len(raw) != self.size:
            raise PackException(chain=[self.__class__.__name__])

        self._bits = Bits(raw)
        self._endianess = endianess

    @classmethod
    def new(cls, value) -> "TaggedScalar":
        '''Wrap an ordinary host value: the tag is NATIVE.'''
        return cls(value)

    @classmethod
    def with_tag(cls, value, endianess: Endianess) -> "TaggedScalar":
        return cls(value, endianess=endianess)

    @classmethod
    def from_raw(cls, raw: bytes, endianess=Endianess.NATIVE) -> "TaggedScalar":
        '''Build the scalar directly from its bit pattern, without any reordering.'''
        instance = cls.__new__(cls)
        instance._init(bytes(raw), endianess)
        return instance

    @classmethod
    def from_stream(cls, source) -> Optional["TaggedScalar"]:
        '''Read exactly size bytes from the source and keep them verbatim.

        The result is tagged NATIVE, meaning "not classified yet": the bytes
        are in whatever order the source had them. It returns None if the
        source doesn't have enough data or fails while reading.'''
        stream = source if isinstance(source, Stream) else Stream(source)

        try:
            raw = stream.read_exact(cls._get_size())
        except ShortReadException:
            logger.debug('not enough data to unpack %s from %s' % (cls.__name__, stream))
            return None
        except OSError as e:
            logger.debug('unable to unpack %s from %s: %s' % (cls.__name__, stream, e))
            return None

        return cls.from_raw(raw)

    @classmethod
    def _pack(cls, value) -> bytes:
        if cls.format is None:
            raise UnsupportedScalarException(chain=[cls.__name__])

        try:
            return struct.pack('=%s' % cls.format, value)
        except (struct.error, OverflowError) as e:
            logger.debug('%r cannot be packed as %s: %s' % (value, cls.__name__, e))
            raise PackException(chain=[cls.__name__])

    @classmethod
    def _unpack(cls, raw: bytes):
        '''Read the bytes in native order, None if the host type cannot carry
        that exact bit pattern (it happens with some NaN for floats).'''
        value = struct.unpack('=%s' % cls.format, raw)[0]

        if struct.pack('=%s' % cls.format, value) != raw:
            logger.debug('bit pattern %s is not representable as %s' % (raw.hex(), cls.__name__))
            return None

        return value

    @classmethod
    def _get_size(cls) -> int:
        if cls.format is None:
            raise UnsupportedScalarException(chain=[cls.__name__])

        return struct.calcsize('=%s' % cls.format)

    size = property(fget=lambda self: self._get_size())

    @property
    def raw(self) -> bytes:
        return self._bits.bytes

    @property
    def value(self):
        '''The stored bits read in native order, no conversion applied.'''
        return struct.unpack('=%s' % self.format, self.raw)[0]

    @property
    def endianess(self) -> Endianess:
        return self._endianess

    tag = endianess

    def __repr__(self):
        return '<%s(0x%s,%s)>' % (self.__class__.__name__, self._bits.hex, self._endianess.name)

    def __eq__(self, other):
        if not isinstance(other, TaggedScalar):
            return NotImplemented

        return (
            self.__class__ is other.__class__ and
            self._bits == other._bits and
            self._endianess is other._endianess
        )

    def __hash__(self):
        return hash((self.__class__, self.raw, self._endianess))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def cast(self, endianess: Endianess):
        '''Returns the value in the byte order indicated.

        Both the stored tag and the target are resolved against the host
        and if the two orders differ the bytes are reversed; it's a
        full reversal, there is no word swapping.

        None is returned only if the host order cannot be determined or
        if the result is a float bit pattern the host cannot represent
        unchanged.'''
        # same tag or a single byte: nothing to resolve
        if self._endianess is endianess or self.size == 1:
            return self._unpack(self.raw)

        try:
            source = self._endianess.resolve()
            destination = endianess.resolve()
        except UnknownArchitectureException:
            logger.warning('unable to determine the host byte order')
            return None

        if source is destination:
            return self._unpack(self.raw)

        swapped = BitArray(self._bits)
        swapped.byteswap(self.size)

        return self._unpack(swapped.bytes)

    def as_little(self):
        return self.cast(Endianess.LITTLE_ENDIAN)

    def as_big(self):
        return self.cast(Endianess.BIG_ENDIAN)

    def as_native(self):
        return self.cast(Endianess.NATIVE)

    def unpack(self, default):
        '''Returns the native value or default if the cast fails.

        The default is mandatory: deciding what a failure maps to is
        up to the caller.'''
        value = self.as_native()
        return default if value is None else value

    def pack(self, endianess=Endianess.NATIVE, stream=None) -> Optional[bytes]:
        '''Returns the bytes to emit to have this value encoded in the given order.

        If a stream is passed the bytes are written into it.'''
        value = self.cast(endianess)
        if value is None:
            return None

        raw = struct.pack('=%s' % self.format, value)

        if stream is not None:
            stream.write(raw)

        return raw


class U8(TaggedScalar):
    __slots__ = ()
    format = 'B'


class I8(TaggedScalar):
    __slots__ = ()
    format = 'b'


class U16(TaggedScalar):
    __slots__ = ()
    format = 'H'


class I16(TaggedScalar):
    __slots__ = ()
    format = 'h'


class U32(TaggedScalar):
    __slots__ = ()
    format = 'I'


class I32(TaggedScalar):
    __slots__ = ()
    format = 'i'


class U64(TaggedScalar):
    __slots__ = ()
    format = 'Q'


class I64(TaggedScalar):
    __slots__ = ()
    format = 'q'


class F32(TaggedScalar):
    __slots__ = ()
    format = 'f'


class F64(TaggedScalar):
    __slots__ = ()
    format = 'd'


SCALARS: Dict[str, Type[TaggedScalar]] = {
    cls.format: cls for cls in (U8, I8, U16, I16, U32, I32, U64, I64, F32, F64)
}


def scalar_for_format(fmt: str) -> Type[TaggedScalar]:
    try:
        return SCALARS[fmt]
    except KeyError:
        raise UnsupportedScalarException(chain=[fmt])
