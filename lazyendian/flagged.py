'''
Files that signal their own byte order with the first byte: 0x00 means
that what follows is little endian, 0x01 big endian.

    01 | 00 00 00 02 | ..
    ^-- big endian flag
         ^-- big endian 0x2
'''
import logging
from typing import List, Optional, Tuple, Type

from .enum import Endianess
from .exceptions import MagicException, PackException, ShortReadException
from .scalars import TaggedScalar, U8
from .streams import Stream


logger = logging.getLogger(__name__)


FLAG_LITTLE = 0x00
FLAG_BIG = 0x01


def endianess_from_flag(flag: int) -> Endianess:
    if flag == FLAG_LITTLE:
        return Endianess.LITTLE_ENDIAN
    if flag == FLAG_BIG:
        return Endianess.BIG_ENDIAN

    logger.warning('unknown endianess flag 0x%02x' % flag)
    raise MagicException(chain=['flag'])


def flag_from_endianess(endianess: Endianess) -> int:
    return FLAG_BIG if endianess.is_big() else FLAG_LITTLE


def read_flagged(source, scalar_cls: Type[TaggedScalar], count: Optional[int] = None) -> Tuple[Endianess, List]:
    '''Read the flag and then count values (or all of them until EOF),
    returning them already cast to the order the flag indicates.'''
    stream = source if isinstance(source, Stream) else Stream(source)

    flag = U8.from_stream(stream)
    if flag is None:
        raise ShortReadException(chain=['flag'])

    endianess = endianess_from_flag(flag.value)
    logger.debug('flag 0x%02x: values are %s' % (flag.value, endianess.name))

    size = scalar_cls._get_size()

    values = []
    while count is None or len(values) < count:
        try:
            raw = stream.read_exact(size)
        except ShortReadException as e:
            # a clean EOF ends the values only when no count was asked
            if count is None and e.got == 0:
                break
            raise ShortReadException(chain=['values', str(len(values))], got=e.got)

        values.append(scalar_cls.from_raw(raw).cast(endianess))

    return endianess, values


def write_flagged(sink, endianess: Endianess, scalar_cls: Type[TaggedScalar], values) -> int:
    '''Write the flag followed by the values encoded with the given endianess.

    It returns the number of bytes written.'''
    stream = sink if isinstance(sink, Stream) else Stream(sink)

    written = stream.write(bytes([flag_from_endianess(endianess)]))

    for value in values:
        raw = scalar_cls.new(value).pack(endianess)
        if raw is None:
            raise PackException(chain=['values', str(value)])
        written += stream.write(raw)

    return written
