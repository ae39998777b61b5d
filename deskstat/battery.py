"""Battery components read from the kernel's power supply class."""

from __future__ import annotations

import os
import re

from .util import read_text

POWER_SUPPLY = "/sys/class/power_supply"

_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "o",
    "Not charging": "o",
}
_INT = re.compile(r"\s*([+-]?\d+)")
_UINT = re.compile(r"\s*\+?(\d+)")
_STATE = re.compile(r"[a-zA-Z ]{1,12}")


def _path(bat: str, name: str) -> str:
    return os.path.join(POWER_SUPPLY, bat, name)


def _pick(bat: str, *names: str) -> str | None:
    """Return the first readable attribute file among ``names``."""
    for name in names:
        path = _path(bat, name)
        if os.access(path, os.R_OK):
            return path
    return None


def _read_uint(path: str | None) -> int | None:
    if path is None:
        return None
    text = read_text(path)
    if text is None:
        return None
    match = _UINT.match(text)
    return int(match.group(1)) if match else None


def _read_state(bat: str) -> str | None:
    text = read_text(_path(bat, "status"))
    if text is None:
        return None
    match = _STATE.match(text)
    return match.group(0) if match else None


def battery_perc(bat: str) -> str | None:
    """Battery capacity in percent."""
    text = read_text(_path(bat, "capacity"))
    if text is None:
        return None
    match = _INT.match(text)
    return str(int(match.group(1))) if match else None


def battery_state(bat: str) -> str | None:
    """Charging state as a symbol: + charging, - discharging, o full or idle."""
    state = _read_state(bat)
    if state is None:
        return None
    return _STATE_SYMBOLS.get(state, "?")


def battery_remaining(bat: str) -> str | None:
    """Time left while discharging, as hours and minutes; empty otherwise."""
    state = _read_state(bat)
    if state is None:
        return None
    charge_now = _read_uint(_pick(bat, "charge_now", "energy_now"))
    if charge_now is None:
        return None
    if state != "Discharging":
        return ""
    current_now = _read_uint(_pick(bat, "current_now", "power_now"))
    if not current_now:
        return None
    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"