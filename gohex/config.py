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

from dataclasses import dataclass

DEFAULT_COLUMNS = 10
DEFAULT_INDENT = 1
DEFAULT_PACKAGE = 'main'
DEFAULT_VARIABLE = 'gohex'


class GohexError(Exception):
    pass


class ConfigurationError(GohexError):
    '''Raised for options that cannot produce a valid byte slice'''


@dataclass(frozen=True)
class Configuration:
    '''Formatting options, resolved once per run'''

    columns: int = DEFAULT_COLUMNS
    indent: int = DEFAULT_INDENT
    variable: str = DEFAULT_VARIABLE
    package: str = DEFAULT_PACKAGE
    strip: bool = False

    @property
    def declarations(self):
        return not self.strip

    @property
    def package_declaration(self):
        return self.declarations and self.package != ''

    def validate(self):
        if self.columns < 1:
            raise ConfigurationError('invalid number of columns (min. 1)')
        if self.indent < 1:
            raise ConfigurationError('invalid indentation (min. 1)')
        if not self.variable:
            raise ConfigurationError('invalid variable name')
        return self
