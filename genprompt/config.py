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

"""Settings read from prompt.yaml, and the configuration of a single run.

Settings are echoed to stdout but otherwise don't affect the generated prompt.
"""

import os

import yaml

import genprompt.exception
import genprompt.util

SETTINGS_NAME = 'prompt'
# JSON is a subset of YAML, so prompt.json is parsed the same way.
SETTINGS_EXTENSIONS = ('json', 'yaml', 'yml')
ALWAYS_ON = {'verbose': True}


class Settings(object):

    def __init__(self, values=None, path=None):
        self.values = dict(values) if values else {}
        self.path = path

    def __repr__(self):
        return f'Settings({self.path}: {self.values})'

    def merged(self, overrides):
        values = dict(self.values)
        values.update(Settings.lowercase_keys(overrides))
        return Settings(values, self.path)

    def dump(self):
        try:
            return yaml.safe_dump(self.values, default_flow_style=False, sort_keys=True)
        except yaml.YAMLError as e:
            raise genprompt.exception.KillShellException(f'Unable to serialize settings: {e}')

    @staticmethod
    def find(dirs):
        for dir in dirs:
            for extension in SETTINGS_EXTENSIONS:
                path = dir / f'{SETTINGS_NAME}.{extension}'
                if os.path.isfile(path):
                    return path
        return None

    @staticmethod
    def load(dirs):
        path = Settings.find(dirs)
        if path is None:
            return Settings()
        try:
            with open(path, encoding='utf-8') as settings_file:
                values = yaml.safe_load(settings_file)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            genprompt.util.print_to_stderr(f'Error reading config file {path}, {e}')
            return Settings()
        if values is None:
            values = {}
        if not isinstance(values, dict):
            genprompt.util.print_to_stderr(f'Error reading config file {path}, not a mapping')
            return Settings()
        return Settings(Settings.lowercase_keys(values), path)

    # Keys are case-insensitive, so Verbose and verbose are the same setting.
    @staticmethod
    def lowercase_keys(values):
        if not isinstance(values, dict):
            return values
        return {str(k).lower(): Settings.lowercase_keys(v) for k, v in values.items()}


class Config(object):
    """Everything a run needs, collected once at startup.

    locations: Locations, for the paths written to stdout.
    settings: Settings, already merged with ALWAYS_ON.
    colors: ColorOptions from the command line.
    """

    def __init__(self, locations, settings, colors):
        self.locations = locations
        self.settings = settings
        self.colors = colors

    def __repr__(self):
        return f'Config({self.locations.home}, {self.settings}, {self.colors})'

    @staticmethod
    def settings_for(locations):
        return Settings.load(locations.settings_dirs()).merged(ALWAYS_ON)
