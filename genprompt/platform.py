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
from enum import Enum

import genprompt.util


class KernelFamily(Enum):
    LINUX = 'Linux'
    DARWIN = 'Darwin'
    SUNOS = 'SunOS'
    UNKNOWN = 'unknown'

    @staticmethod
    def of(kernel_name):
        for family in KernelFamily:
            if family.value == kernel_name:
                return family
        return KernelFamily.UNKNOWN


class PlatformMarker(object):

    def __init__(self, path, name, os_class):
        self._path = path
        self._name = name
        self._os_class = os_class

    def __repr__(self):
        return f'PlatformMarker({self._path}, {self._name}, {self._os_class})'

    @property
    def path(self):
        return self._path

    @property
    def name(self):
        return self._name

    @property
    def os_class(self):
        return self._os_class


# Order matters: when more than one marker file exists, the earliest entry wins.
MARKERS = (
    PlatformMarker('/etc/centos-release', 'CentOS', 'redhat'),
    PlatformMarker('/etc/fedora-release', 'Fedora', 'redhat'),
    PlatformMarker('/etc/redhat-release', 'RedHat', 'redhat'),
    PlatformMarker('/etc/SuSE-release', 'SuSE', 'suse'),
    PlatformMarker('/etc/mandrake-release', 'Mandrake', 'mandrake'),
    PlatformMarker('/etc/debian_version', 'Debian', 'debian'),
    PlatformMarker('/etc/wrs-release', 'WindRiver', 'windriver'),
    PlatformMarker('/etc/snow-release', 'Snow', 'snow'),
)


class DetectedPlatform(object):

    def __init__(self, kernel, name='', os_class=''):
        assert (len(name) == 0) == (len(os_class) == 0), (name, os_class)
        self._kernel = kernel
        self._name = name
        self._os_class = os_class

    def __repr__(self):
        return f'DetectedPlatform({self._kernel.value}, {self._name!r}, {self._os_class!r})'

    def __hash__(self):
        return hash((self._kernel, self._name, self._os_class))

    def __eq__(self, other):
        return (isinstance(other, DetectedPlatform) and
                self._kernel == other._kernel and
                self._name == other._name and
                self._os_class == other._os_class)

    @property
    def kernel(self):
        return self._kernel

    @property
    def name(self):
        return self._name

    @property
    def os_class(self):
        return self._os_class


class PlatformIdentifier(object):
    """Works out which OS, and for Linux which distribution, this process is running on.

    uname: Function returning the kernel name, e.g. 'Linux'. Defaults to running uname -s.
    exists: Function taking a path and returning True iff a file exists there. Defaults to os.path.exists,
    which treats an unreadable path as missing.
    markers: The ordered catalog of marker files probed on Linux.
    """

    def __init__(self, uname=None, exists=None, markers=MARKERS):
        self.uname = uname if uname else genprompt.util.kernel_name
        self.exists = exists if exists else os.path.exists
        self.markers = markers

    def identify(self):
        kernel = KernelFamily.of(self.uname())
        if kernel is KernelFamily.LINUX:
            name, os_class = self.scan_markers()
            return DetectedPlatform(kernel, name, os_class)
        elif kernel is KernelFamily.DARWIN:
            return DetectedPlatform(kernel, 'Darwin', 'mac')
        elif kernel is KernelFamily.SUNOS:
            return DetectedPlatform(kernel, 'SunOS', 'solaris')
        else:
            return DetectedPlatform(kernel)

    def scan_markers(self):
        # Every marker is probed, even after a match. Only the first match is recorded.
        found = None
        for marker in self.markers:
            if self.exists(marker.path) and found is None:
                found = marker
        return ('', '') if found is None else (found.name, found.os_class)


def identify():
    return PlatformIdentifier().identify()
