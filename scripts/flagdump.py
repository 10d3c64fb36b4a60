#!/usr/bin/env python3
'''
Dump the values contained in a file that starts with an endianess flag
(0x00 little, 0x01 big) followed by scalars of a single type.

    $ flagdump.py I file.bin
    $ flagdump.py --write I big file.bin 1 2 3
'''
import os
import sys
import logging

from lazyendian import Endianess, scalar_for_format
from lazyendian.exceptions import LazyEndianException
from lazyendian.flagged import read_flagged, write_flagged


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print(f'usage: {progname} <format> <file>')
    print(f'       {progname} --write <format> <little|big> <file> [values...]')
    sys.exit(1)


def dump(scalar_cls, path):
    with open(path, 'rb') as f:
        endianess, values = read_flagged(f, scalar_cls)

    print(f'{path}: {endianess.name}, {len(values)} values of type {scalar_cls.__name__}')
    for idx, value in enumerate(values):
        print(f'{idx:>6} {value}')


def write(scalar_cls, order, path, values):
    endianess = {
        'little': Endianess.LITTLE_ENDIAN,
        'big': Endianess.BIG_ENDIAN,
    }[order]

    convert = float if scalar_cls.format in 'fd' else lambda _: int(_, 0)

    with open(path, 'wb') as f:
        written = write_flagged(f, endianess, scalar_cls, [convert(_) for _ in values])

    logger.info(f'written {written} bytes to \'{path}\'')


if __name__ == '__main__':
    args = sys.argv[1:]

    try:
        if len(args) >= 4 and args[0] == '--write' and args[2] in ('little', 'big'):
            write(scalar_for_format(args[1]), args[2], args[3], args[4:])
        elif len(args) == 2:
            dump(scalar_for_format(args[0]), args[1])
        else:
            usage(sys.argv[0])
    except ValueError:
        usage(sys.argv[0])
    except LazyEndianException as e:
        logger.error(f'{e.__class__.__name__}: {".".join(e.chain)}')
        sys.exit(1)
