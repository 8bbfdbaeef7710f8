"""
Builtin OS names and legacy series.

Series are the short names (e.g. "focal") that older tooling used in place
of an OS and channel. The table maps each one to (os, channel).
"""

from typing import Dict, FrozenSet, Tuple


# Supported OS names
UBUNTU = "ubuntu"
CENTOS = "centos"
WINDOWS = "windows"
OSX = "osx"
OPENSUSE = "opensuse"
GENERIC_LINUX = "genericlinux"

VALID_OS: FrozenSet[str] = frozenset([UBUNTU, CENTOS, WINDOWS, OSX, OPENSUSE, GENERIC_LINUX])


BUILTIN_SERIES: Dict[str, Tuple[str, str]] = {
    # Ubuntu
    "precise": (UBUNTU, "12.04/stable"),
    "quantal": (UBUNTU, "12.10/stable"),
    "raring": (UBUNTU, "13.04/stable"),
    "saucy": (UBUNTU, "13.10/stable"),
    "trusty": (UBUNTU, "14.04/stable"),
    "utopic": (UBUNTU, "14.10/stable"),
    "vivid": (UBUNTU, "15.04/stable"),
    "wily": (UBUNTU, "15.10/stable"),
    "xenial": (UBUNTU, "16.04/stable"),
    "yakkety": (UBUNTU, "16.10/stable"),
    "zesty": (UBUNTU, "17.04/stable"),
    "artful": (UBUNTU, "17.10/stable"),
    "bionic": (UBUNTU, "18.04/stable"),
    "cosmic": (UBUNTU, "18.10/stable"),
    "disco": (UBUNTU, "19.04/stable"),
    "eoan": (UBUNTU, "19.10/stable"),
    "focal": (UBUNTU, "20.04/stable"),
    "groovy": (UBUNTU, "20.10/stable"),
    "hirsute": (UBUNTU, "21.04/stable"),
    # Windows
    "win2008r2": (WINDOWS, "win2008r2/stable"),
    "win2012hvr2": (WINDOWS, "win2012hvr2/stable"),
    "win2012hv": (WINDOWS, "win2012hv/stable"),
    "win2012r2": (WINDOWS, "win2012r2/stable"),
    "win2012": (WINDOWS, "win2012/stable"),
    "win2016": (WINDOWS, "win2016/stable"),
    "win2016hv": (WINDOWS, "win2016hv/stable"),
    "win2016nano": (WINDOWS, "win2016nano/stable"),
    "win2019": (WINDOWS, "win2019/stable"),
    "win7": (WINDOWS, "win7/stable"),
    "win8": (WINDOWS, "win8/stable"),
    "win81": (WINDOWS, "win81/stable"),
    "win10": (WINDOWS, "win10/stable"),
    # CentOS
    "centos7": (CENTOS, "centos7/stable"),
    "centos8": (CENTOS, "centos8/stable"),
    # openSUSE
    "opensuseleap": (OPENSUSE, "opensuse42/stable"),
    # Generic Linux
    "genericlinux": (GENERIC_LINUX, "latest/stable"),
}
