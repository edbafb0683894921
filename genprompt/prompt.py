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

import jinja2

import genprompt.exception
import genprompt.object.color

# Output is bash source, assigning PS1. \u, \h, \T and \w are expanded by bash, not here.
TEMPLATE_TEXT = r'''
PS1="{{ main_color }}\u@\h{{ end_color }}/{{ os_color }}{{ os_name }}{{ end_color }} \T [{{ dir_color }}\w{{ end_color }}]
# "
'''


class PromptFields(object):

    def __init__(self, main_color, os_color, dir_color, end_color, os_name, os_class):
        self.main_color = main_color
        self.os_color = os_color
        self.dir_color = dir_color
        self.end_color = end_color
        self.os_name = os_name
        self.os_class = os_class

    def __repr__(self):
        return f'PromptFields({self.template_vars()})'

    def template_vars(self):
        return {'main_color': self.main_color,
                'os_color': self.os_color,
                'dir_color': self.dir_color,
                'end_color': self.end_color,
                'os_name': self.os_name,
                'os_class': self.os_class}

    @staticmethod
    def of(main_color, os_color, dir_color, platform):
        # Colors are names, e.g. light_cyan. platform is a DetectedPlatform.
        color = genprompt.object.color
        return PromptFields(color.resolve(main_color),
                            color.resolve(os_color),
                            color.resolve(dir_color),
                            color.end(),
                            platform.name,
                            platform.os_class)


class PromptRenderer(object):

    def __init__(self, template_text=TEMPLATE_TEXT):
        env = jinja2.Environment(autoescape=False,
                                 keep_trailing_newline=True,
                                 undefined=jinja2.StrictUndefined)
        try:
            self.template = env.from_string(template_text)
        except jinja2.TemplateSyntaxError as e:
            raise genprompt.exception.KillShellException(f'Prompt template does not compile: {e}')

    def render(self, fields):
        try:
            return self.template.render(**fields.template_vars())
        except jinja2.TemplateError as e:
            raise genprompt.exception.KillShellException(f'Unable to render prompt template: {e}')


def render(fields):
    return PromptRenderer().render(fields)
