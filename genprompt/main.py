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

import sys

import genprompt.cliargs
import genprompt.config
import genprompt.exception
import genprompt.locations
import genprompt.platform
import genprompt.prompt
import genprompt.util

Config = genprompt.config.Config
PromptFields = genprompt.prompt.PromptFields


class Main(object):

    def __init__(self, config, identifier=None, renderer=None):
        self.config = config
        self.identifier = identifier if identifier else genprompt.platform.PlatformIdentifier()
        # Compiles the template, so a broken template is reported before anything is probed.
        self.renderer = renderer if renderer else genprompt.prompt.PromptRenderer()

    def prompt(self):
        platform = self.identifier.identify()
        colors = self.config.colors
        fields = PromptFields.of(colors.main_color, colors.os_color, colors.dir_color, platform)
        return self.renderer.render(fields)

    def run(self):
        print(self.prompt(), end='')
        print(self.config.locations.user_config(), end='')


def main(argv=None, locations=None, identifier=None, renderer=None):
    if argv is None:
        argv = sys.argv[1:]
    if locations is None:
        locations = genprompt.locations.Locations()
    if len(argv) == 0:
        print(f'source {locations.env_script()}')
        return
    settings = Config.settings_for(locations)
    print(settings.dump(), end='')
    colors = genprompt.cliargs.parse_colors(argv)
    Main(Config(locations, settings, colors), identifier, renderer).run()


def run(argv=None, locations=None, identifier=None, renderer=None):
    try:
        main(argv, locations, identifier, renderer)
    except genprompt.exception.HelpRequested:
        sys.exit(0)
    except genprompt.exception.UsageException:
        # Already reported, along with usage.
        sys.exit(2)
    except genprompt.exception.KillShellException as e:
        genprompt.util.print_to_stderr(f'genprompt: {e}')
        sys.exit(1)


if __name__ == '__main__':
    run()
