"""Components describing the host, the current user and the kernel."""

from __future__ import annotations

import os
import pwd
import re
import socket
import sys
import time

from .util import read_text, warn

ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"

_UINT = re.compile(r"\s*\+?(\d+)")


def _scan_uint(text: str | None) -> int | None:
    if text is None:
        return None
    match = _UINT.match(text)
    return int(match.group(1)) if match else None


def _uptime_clock() -> int:
    for name in ("CLOCK_BOOTTIME", "CLOCK_UPTIME", "CLOCK_MONOTONIC"):
        clock = getattr(time, name, None)
        if clock is not None:
            return clock
    raise OSError("no suitable clock available")


def entropy(unused: str | None = None) -> str | None:
    """Available kernel entropy; infinite where the kernel does not count it."""
    if not sys.platform.startswith("linux"):
        return "\u221e"
    value = _scan_uint(read_text(ENTROPY_AVAIL))
    return None if value is None else str(value)


def hostname(unused: str | None = None) -> str | None:
    """The host name."""
    try:
        return socket.gethostname()
    except OSError as exc:
        warn(f"gethostbyname: {exc.strerror or exc}")
        return None


def kernel_release(unused: str | None = None) -> str | None:
    """The kernel release, as ``uname -r`` prints it."""
    try:
        return os.uname().release
    except OSError as exc:
        warn(f"uname: {exc.strerror or exc}")
        return None


def load_avg(unused: str | None = None) -> str | None:
    """The 1, 5 and 15 minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def uptime(unused: str | None = None) -> str | None:
    """System uptime as hours and minutes."""
    try:
        clock = _uptime_clock()
        seconds = int(time.clock_gettime(clock))
    except OSError as exc:
        warn(f"clock_gettime: {exc}")
        return None
    hours, rest = divmod(seconds, 3600)
    return f"{hours}h {rest // 60}m"


def gid(unused: str | None = None) -> str:
    """Real group id of the current process."""
    return str(os.getgid())


def uid(unused: str | None = None) -> str:
    """Effective user id of the current process."""
    return str(os.geteuid())


def username(unused: str | None = None) -> str | None:
    """Name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError:
        warn(f"getpwuid '{euid}': no such user")
        return None


def temp(file: str) -> str | None:
    """Temperature in degrees Celsius from a sensor file holding millidegrees."""
    value = _scan_uint(read_text(file))
    return None if value is None else str(value // 1000)