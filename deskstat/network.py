"""Network components: interface addresses, traffic rates and wireless state."""

from __future__ import annotations

import array
import fcntl
import ipaddress
import os
import re
import socket
import struct

from .util import fmt_human, read_text, warn

NET_SYS = "/sys/class/net"
IF_INET6 = "/proc/net/if_inet6"
PROC_WIRELESS = "/proc/net/wireless"

_SIOCGIFADDR = 0x8915
_SIOCGIWESSID = 0x8B1B
_IFNAMSIZ = 16
_IW_ESSID_MAX_SIZE = 32
_IWREQ_SIZE = 32

_UINT = re.compile(r"\s*\+?(\d+)")
_LINK = re.compile(r"\s*[+-]?\d+\s+([+-]?\d+)")
_LINE_LIMIT = 1022


def _ifname(interface: str) -> bytes | None:
    name = interface.encode()
    if len(name) >= _IFNAMSIZ:
        return None
    return name


def ipv4(interface: str) -> str | None:
    """The IPv4 address of ``interface``, or None if it has none."""
    name = _ifname(interface)
    if not name:
        return None
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as exc:
        warn(f"socket 'AF_INET': {exc.strerror or exc}")
        return None
    with sock:
        try:
            result = fcntl.ioctl(sock.fileno(), _SIOCGIFADDR, struct.pack("40s", name))
        except OSError:
            return None
    return socket.inet_ntoa(result[20:24])


def ipv6(interface: str) -> str | None:
    """The first IPv6 address of ``interface``, or None if it has none."""
    text = read_text(IF_INET6)
    if text is None:
        return None
    for line in text.splitlines():
        fields = line.split()
        if len(fields) < 6 or fields[5] != interface:
            continue
        try:
            address = ipaddress.IPv6Address(bytes.fromhex(fields[0]))
        except ValueError:
            warn(f"getnameinfo: malformed address '{fields[0]}'")
            return None
        host = address.compressed
        if address.is_link_local:
            host = f"{host}%{interface}"
        return host
    return None


class NetSpeed:
    """Rate of change of an interface byte counter since the previous call."""

    def __init__(
        self, statistic: str, interval: int = 1000, root: str | None = None
    ) -> None:
        self.statistic = statistic
        self.interval = interval
        self.root = root
        self._bytes = 0

    def __call__(self, interface: str) -> str | None:
        old = self._bytes
        path = os.path.join(
            self.root or NET_SYS, interface, "statistics", self.statistic
        )
        text = read_text(path)
        if text is None:
            return None
        match = _UINT.match(text)
        if match is None:
            return None
        self._bytes = int(match.group(1))
        if old == 0:
            return None
        delta = (self._bytes - old) % (1 << 64)
        return fmt_human(delta * 1000 // self.interval, 1024)


_rx = NetSpeed("rx_bytes")
_tx = NetSpeed("tx_bytes")


def netspeed_rx(interface: str) -> str | None:
    """Receive rate of ``interface`` per second."""
    return _rx(interface)


def netspeed_tx(interface: str) -> str | None:
    """Transmit rate of ``interface`` per second."""
    return _tx(interface)


def wifi_perc(interface: str) -> str | None:
    """Wireless link quality of ``interface`` in percent."""
    path = os.path.join(NET_SYS, interface, "operstate")
    try:
        with open(path, encoding="utf-8", errors="replace") as fh:
            status = fh.readline(4)
    except OSError as exc:
        warn(f"fopen '{path}': {exc.strerror or exc}")
        return None
    if status != "up\n":
        return None

    try:
        with open(PROC_WIRELESS, encoding="utf-8", errors="replace") as fh:
            lines = [fh.readline(_LINE_LIMIT) for _ in range(3)]
    except OSError as exc:
        warn(f"fopen '{PROC_WIRELESS}': {exc.strerror or exc}")
        return None
    line = lines[2]
    if not line:
        return None

    start = line.find(interface)
    if start < 0:
        return None
    match = _LINK.match(line, start + len(interface) + 2)
    if match is None:
        return None
    # 70 is the maximum link quality reported by the kernel
    return str(int(int(match.group(1)) / 70 * 100))


def wifi_essid(interface: str) -> str | None:
    """The ESSID of the network ``interface`` is associated with."""
    name = _ifname(interface)
    if name is None:
        warn("vsnprintf: Output truncated")
        return None
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as exc:
        warn(f"socket 'AF_INET': {exc.strerror or exc}")
        return None
    essid = array.array("B", bytes(_IW_ESSID_MAX_SIZE + 1))
    address, _ = essid.buffer_info()
    request = bytearray(
        struct.pack("16sPHH", name, address, _IW_ESSID_MAX_SIZE + 1, 0).ljust(
            _IWREQ_SIZE, b"\0"
        )
    )
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), _SIOCGIWESSID, request, True)
        except OSError as exc:
            warn(f"ioctl 'SIOCGIWESSID': {exc.strerror or exc}")
            return None
    value = essid.tobytes().split(b"\0", 1)[0]
    if not value:
        return None
    return value.decode("utf-8", errors="replace")