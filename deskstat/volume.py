"""Mixer volume read through the OSS mixer interface."""

from __future__ import annotations

import fcntl
import os
import struct

from .util import warn

_SOUND_DEVICE_NAMES = (
    "vol", "bass", "treble", "synth", "pcm", "speaker", "line", "mic", "cd",
    "mix", "pcm2", "rec", "igain", "ogain", "line1", "line2", "line3",
    "dig1", "dig2", "dig3", "phin", "phout", "video", "radio", "monitor",
)


def _ior(kind: str, number: int, size: int) -> int:
    return (2 << 30) | (size << 16) | (ord(kind) << 8) | number


_SOUND_MIXER_READ_DEVMASK = _ior("M", 254, 4)


def _mixer_read(device: int) -> int:
    return _ior("M", device, 4)


def _read_int(fd: int, request: int) -> int:
    result = fcntl.ioctl(fd, request, struct.pack("i", 0))
    return struct.unpack("i", result)[0]


def vol_perc(card: str) -> str | None:
    """Master volume of the mixer device ``card`` in percent."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError as exc:
        warn(f"open '{card}': {exc.strerror or exc}")
        return None
    try:
        try:
            devmask = _read_int(fd, _SOUND_MIXER_READ_DEVMASK)
        except OSError as exc:
            warn(f"ioctl 'SOUND_MIXER_READ_DEVMASK': {exc.strerror or exc}")
            return None
        value = None
        for index, name in enumerate(_SOUND_DEVICE_NAMES):
            if devmask & (1 << index) and name == "vol":
                try:
                    value = _read_int(fd, _mixer_read(index))
                except OSError as exc:
                    warn(f"ioctl 'MIXER_READ({index})': {exc.strerror or exc}")
                    return None
    finally:
        os.close(fd)
    if value is None:
        return None
    return str(value & 0xFF)