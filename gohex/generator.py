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

from . import declarations
from .encoder import write_byte_slice


def generate(source, sink, config) -> int:
    '''Write a Go source file declaring the contents of source as a
    byte slice.  The caller validates config and flushes sink.'''
    if config.package_declaration:
        declarations.declare_package(sink, config.package)

    if config.declarations:
        declarations.open_variable(sink, config.variable, config.indent)

    count = write_byte_slice(source, sink, config.columns, config.indent)

    if config.declarations:
        declarations.close_variable(sink, config.indent)

    return count
