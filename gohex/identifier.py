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

'''Turn arbitrary names into Go identifiers'''


def _is_letter(ch):
    return ch.isalpha()


def _is_digit(ch):
    return ch.isdecimal()


def sanitize(name: str) -> str:
    '''Return name as a bare Go identifier.

    A leading character that is neither a letter nor an underscore gets an
    underscore prepended, and every other character that is not a letter
    or digit is replaced by an underscore.  Different names may map to the
    same identifier.
    '''
    if not name:
        return '_'

    if not _is_letter(name[0]) and name[0] != '_':
        name = '_' + name

    return ''.join(ch if _is_letter(ch) or _is_digit(ch) else '_'
                   for ch in name)
