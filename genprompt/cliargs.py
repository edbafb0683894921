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

import genprompt.exception
import genprompt.util

USAGE = '''usage: genprompt [-main COLOR] [-os COLOR] [-dir COLOR]

With no arguments, print a command sourcing this host's prompt script.
Otherwise print the settings and a PS1 definition using the given colors.

Flags may be written -flag value, -flag=value, or with a -- prefix.

    -main COLOR     Color of user@host (default: light_cyan)
    -os COLOR       Color of the OS name (default: green)
    -dir COLOR      Color of the current directory (default: yellow)
    -h, -help       Print this message

Unknown color names are rendered as white.'''

HELP_FLAGS = ('h', 'help')


class FlagArg(object):

    def __init__(self, name, default):
        self.name = name
        self.default = default
        self.envvar = None  # Filled in by CommandLine

    def __repr__(self):
        return f'-{self.name}'


class CommandLine(object):

    def __init__(self, usage, **var_arg):
        self.usage = usage
        self.var_arg = var_arg
        names = set()
        for var, arg in self.var_arg.items():
            assert type(arg) is FlagArg, arg
            assert arg.name not in names, f'Duplicated flag: {arg}'
            names.add(arg.name)
            arg.envvar = var

    def parse(self, argv):
        """Returns (values, rest). values maps each var to its flag's value, or the default. rest is what follows
        the flags, starting with the first argument that isn't one."""
        values = {}
        for arg in self.var_arg.values():
            values[arg.envvar] = arg.default
        a = 0
        while a < len(argv):
            token = argv[a]
            if len(token) < 2 or token[0] != '-':
                break
            a += 1
            if token == '--':
                break
            name = token[2:] if token.startswith('--') else token[1:]
            if len(name) == 0 or name[0] in '-=':
                self.report_error(f'Bad flag syntax: {token}')
            value = None
            if '=' in name:
                name, value = name.split('=', 1)
            arg = self.arg_of(name)
            if value is None:
                if a == len(argv):
                    self.report_error(f'Flag needs an argument: -{name}')
                value = argv[a]
                a += 1
            values[arg.envvar] = value
        return values, argv[a:]

    def arg_of(self, name):
        for arg in self.var_arg.values():
            if arg.name == name:
                return arg
        if name in HELP_FLAGS:
            genprompt.util.print_to_stderr(self.usage)
            raise genprompt.exception.HelpRequested()
        self.report_error(f'Flag provided but not defined: -{name}')

    def report_error(self, message):
        genprompt.util.print_to_stderr(message)
        genprompt.util.print_to_stderr(self.usage)
        raise genprompt.exception.UsageException(message)


class ColorOptions(object):

    def __init__(self, main_color, os_color, dir_color):
        self.main_color = main_color
        self.os_color = os_color
        self.dir_color = dir_color

    def __repr__(self):
        return f'ColorOptions(main={self.main_color}, os={self.os_color}, dir={self.dir_color})'


def flag(name, default=None):
    return FlagArg(name, default)


def parse_colors(argv):
    command_line = CommandLine(USAGE,
                               main_color=flag('main', 'light_cyan'),
                               os_color=flag('os', 'green'),
                               dir_color=flag('dir', 'yellow'))
    values, _ = command_line.parse(argv)
    return ColorOptions(**values)
