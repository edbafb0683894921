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

import os
import pathlib
import pwd

import genprompt.exception
import genprompt.util


# Location structure -> interface
#
#     <home>/                                     home
#         .bash/prompt.d/<hostname>.sh            env_script()
#         .userconfig.cfg                         user_config()
#         .config/prompt.yaml                     settings_dirs()
#     <cwd>/prompt.yaml                           settings_dirs()
#
# hostname is the lowercased short hostname, e.g. "web01" for "Web01.example.com".

class Locations(object):
    ENV_DIR = ('.bash', 'prompt.d')
    USER_CONFIG_FILENAME = '.userconfig.cfg'
    CONFIG_DIR_NAME = '.config'

    def __init__(self, home=None, hostname=None, cwd=None):
        self.home = Locations.normalize_dir('home directory', home, Locations.user_home)
        self.hostname = hostname if hostname else genprompt.util.short_hostname()
        # Relative, so the current directory is only consulted when settings are searched for.
        self.cwd = pathlib.Path(cwd) if cwd else pathlib.Path('.')

    def env_script(self):
        return self.home.joinpath(*Locations.ENV_DIR) / f'{self.hostname}.sh'

    def user_config(self):
        return self.home / Locations.USER_CONFIG_FILENAME

    def settings_dirs(self):
        return [self.cwd, self.home / Locations.CONFIG_DIR_NAME]

    @staticmethod
    def user_home():
        try:
            return pwd.getpwuid(os.getuid()).pw_dir
        except KeyError:
            raise genprompt.exception.KillShellException(f'Unable to identify the current user (uid {os.getuid()})')

    @staticmethod
    def normalize_dir(description, provided, default):
        dir = provided
        try:
            if dir is None:
                dir = default()
            if not isinstance(dir, pathlib.Path):
                dir = pathlib.Path(dir)
            dir = dir.expanduser()
        except OSError as e:
            raise genprompt.exception.KillShellException(
                f'Unable to start because value of {description} cannot be determined: {e}')
        return dir
