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

from .identifier import sanitize

INDENT = b'\t'


def declare_package(sink, package: str):
    '''Write the Go package declaration, e.g. "package main"'''
    sink.write(f'package {package}\n\n'.encode('utf-8'))


def open_variable(sink, name: str, indent: int):
    '''Write the variable declaration and its opening brace'''
    sink.write(INDENT * (indent - 1))
    sink.write(f'var {sanitize(name)} = []byte{{\n'.encode('utf-8'))


def close_variable(sink, indent: int):
    sink.write(INDENT * (indent - 1))
    sink.write(b'}\n')
