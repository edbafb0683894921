# This file is part of genprompt.
#
# genprompt is free software: you can redistribute it and/or modify it
# under the terms of the GNU General Public License as published by the
# Free Software Foundation, either version 3 of the License, (or at your
# option) any later version.
#
# genprompt is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
# FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License
# for more details.
#
# You should have received a copy of the GNU General Public License
# along with genprompt.  If not, see <https://www.gnu.org/licenses/>.

"""Names of prompt colors, and the bash escape sequences they stand for.

Each code is the tail of an ANSI SGR sequence, i.e. what follows ESC [. A resolved color wraps that
sequence in \\[ and \\], marking it as non-printing so that bash doesn't count it when computing the
length of the prompt.
"""

DEFAULT = 'white'
END = '0m'

# Spellings and codes are used by existing configurations, including light_purpl and gray's 1:30m.
COLORS = {
    'black': '0;30m',
    'red': '0;31m',
    'green': '0;32m',
    'brown': '0;33m',
    'blue': '0;34m',
    'purple': '0;35m',
    'cyan': '0;36m',
    'light_gray': '0;37m',
    'dark_gray': '1;30m',
    'gray': '1:30m',
    'light_blue': '1;34m',
    'light_cyan': '1;36m',
    'light_green': '1;32m',
    'light_purpl': '1;35m',
    'light_red': '1;31m',
    'white': '1;37m',
    'yellow': '1;33m',
}


def wrap(code):
    return f'\\[\033[{code}\\]'


def resolve(name):
    """Return the wrapped escape sequence for the named color. Lookup is exact and case-sensitive.
    Any name not in COLORS gets the sequence for white."""
    return wrap(COLORS.get(name, COLORS[DEFAULT]))


def end():
    return wrap(END)


def names():
    return sorted(COLORS)
