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

import socket
import subprocess
import sys

UNKNOWN_KERNEL = 'unknown'


# Utility to print to stderr, flushing stdout first, to minimize weird ordering due to buffering.
def print_to_stderr(message):
    sys.stdout.flush()
    print(message, file=sys.stderr, flush=True)


def short_hostname(fqdn=None):
    if fqdn is None:
        fqdn = socket.gethostname()
    return fqdn.split('.')[0].lower()


def kernel_name(command=('uname', '-s')):
    """Return the name of the running kernel, as reported by uname, or UNKNOWN_KERNEL if the
    command can't be run or fails. Only a single trailing newline is removed from the output.
    """
    try:
        process = subprocess.run(list(command),
                                 stdout=subprocess.PIPE,
                                 stderr=subprocess.STDOUT,
                                 universal_newlines=True)
    except OSError:
        return UNKNOWN_KERNEL
    if process.returncode != 0:
        return UNKNOWN_KERNEL
    output = process.stdout
    if output.endswith('\n'):
        output = output[:-1]
    return output
