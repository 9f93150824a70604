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

'''Embed static files in Go programs as byte slices'''

from .config import Configuration, ConfigurationError, GohexError
from .encoder import write_byte_slice
from .generator import generate
from .identifier import sanitize

__version__ = '1.0.0'

__all__ = [
    'Configuration',
    'ConfigurationError',
    'GohexError',
    'generate',
    'sanitize',
    'write_byte_slice',
]
