import logging
import struct
from enum import Enum

from .exceptions import UnknownArchitectureException


logger = logging.getLogger(__name__)


def get_native_endianess() -> "Endianess":
    '''Returns the byte order of the running host.

    We pack a known 16 bits value in native order and look at which
    byte comes first.'''
    first = struct.pack('=H', 0x1234)[0]

    if first == 0x34:
        return Endianess.LITTLE_ENDIAN
    if first == 0x12:
        return Endianess.BIG_ENDIAN

    raise UnknownArchitectureException(chain=[])


class Endianess(Enum):
    '''Byte order tag.

    NATIVE is not a concrete order: it stands for "whatever the host uses"
    and it's resolved only when compared with a concrete order.'''
    NATIVE        = 0
    LITTLE_ENDIAN = 1
    BIG_ENDIAN    = 2
    NETWORK       = 2

    def resolve(self) -> "Endianess":
        if self is Endianess.NATIVE:
            return get_native_endianess()

        return self

    def is_native(self) -> bool:
        return self is Endianess.NATIVE

    def is_little(self) -> bool:
        return self.resolve() is Endianess.LITTLE_ENDIAN

    def is_big(self) -> bool:
        return self.resolve() is Endianess.BIG_ENDIAN

    def get_struct_flag(self) -> str:
        return '<' if self.is_little() else '>'
