# Copyright © 2026 The gohex authors
#
# This library is free software; you can redistribute it and/or
# modify it under the terms of the GNU Lesser General Public
# License as published by the Free Software Foundation; either
# version 2 of the licence, or (at your option) any later version.
#
# This library is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this library; if not, see <http://www.gnu.org/licenses/>.

import errno

from .declarations import INDENT

# Rendered literals for every byte value, "0x00" through "0xff"
LITERALS = [f'0x{value:02x}'.encode('ascii') for value in range(256)]
SEPARATOR = b', '
TERMINATOR = b',\n'


def read_chunk(source, size: int) -> bytes:
    '''Read exactly size bytes from source, or fewer at end of stream.

    Pipes and raw streams may return less than asked for; keep reading
    until the chunk is full or a read returns nothing.  A non-blocking
    source with no data available raises BlockingIOError.
    '''
    chunk = bytearray()
    while len(chunk) < size:
        data = source.read(size - len(chunk))
        if data is None:
            raise BlockingIOError(errno.EAGAIN, 'source would block')
        if not data:
            break
        chunk += data
    return bytes(chunk)


def format_line(chunk: bytes, indent: int) -> bytes:
    '''Render one row of the byte slice, e.g. "\t0x48, 0x65,\n"'''
    return (INDENT * indent +
            SEPARATOR.join(LITERALS[value] for value in chunk) +
            TERMINATOR)


def write_byte_slice(source, sink, columns: int, indent: int) -> int:
    '''Stream source into sink as rows of hex literals.

    Each row holds columns literals except possibly the last one.  Input
    is consumed one row at a time, so memory use does not grow with the
    input size.  Returns the number of bytes encoded.
    '''
    total = 0
    while True:
        chunk = read_chunk(source, columns)
        if not chunk:
            return total

        sink.write(format_line(chunk, indent))
        total += len(chunk)

        if len(chunk) < columns:
            return total
