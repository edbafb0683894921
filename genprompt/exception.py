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

"""Exceptions that end a genprompt run.

None of these extend Exception, so they cannot be caught by "except Exception". They propagate to
the entry point in genprompt.main, which reports them and chooses the exit status.
"""


# Fatal setup error: home directory can't be determined, template is broken, settings can't be
# serialized.
class KillShellException(BaseException):

    def __init__(self, cause):
        super().__init__(cause)
        self.cause = cause

    def __str__(self):
        return str(self.cause)


# Bad command line. The usage text has already been printed when this is raised.
class UsageException(KillShellException):

    def __init__(self, message):
        super().__init__(message)
        self.message = message


# -h on the command line. Usage has been printed, and the run ends successfully.
class HelpRequested(BaseException):
    pass
