"""
# Lazy endian scalars.

Some binary formats tell their own byte order only at runtime, for example
with a flag byte at the start of the file. Instead of writing two parsing
paths we read every value as it is and we tag it with its byte order; the
bytes are reordered only when the value is needed.

The byte order of a freshly read value is usually unknown: it's tagged as
NATIVE, a sort of "superposition" that collapses when it's cast to a
concrete order

    >>> value = U32.from_stream(b'\\x00\\x00\\x00\\x02')
    >>> value.cast(Endianess.BIG_ENDIAN)
    2

The same works the other way around, to emit a value in a given order

    >>> U32.new(2).pack(Endianess.BIG_ENDIAN)
    b'\\x00\\x00\\x00\\x02'

"""
from .enum import Endianess, get_native_endianess
from .exceptions import (
    LazyEndianException,
    PackException,
    ShortReadException,
    MagicException,
    UnsupportedScalarException,
    UnknownArchitectureException,
)
from .scalars import (
    TaggedScalar,
    U8, I8,
    U16, I16,
    U32, I32,
    U64, I64,
    F32, F64,
    SCALARS,
    scalar_for_format,
)
from .streams import Stream
