"""Memory and swap components read from the kernel's meminfo table."""

from __future__ import annotations

import re

from .util import fmt_human, read_text

MEMINFO = "/proc/meminfo"

_RAM_KEYS = ("MemTotal", "MemFree", "MemAvailable", "Buffers", "Cached")
_SWAP_KEYS = ("SwapTotal", "SwapFree", "SwapCached")
_SIGNED = re.compile(r"\s*([+-]?\d+)")


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding towards zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _scan_meminfo(count: int) -> list[int] | None:
    """Read the first ``count`` fixed leading fields of meminfo, in order, in kB."""
    text = read_text(MEMINFO)
    if text is None:
        return None
    values = []
    pos = 0
    for key in _RAM_KEYS[:count]:
        match = re.compile(rf"\s*{re.escape(key)}:\s*(\d+)\s*kB").match(text, pos)
        if match is None:
            return None
        values.append(int(match.group(1)))
        pos = match.end()
    return values


def ram_free(unused: str | None = None) -> str | None:
    """Available memory."""
    values = _scan_meminfo(3)
    if values is None:
        return None
    return fmt_human(values[2] * 1024, 1024)


def ram_perc(unused: str | None = None) -> str | None:
    """Memory in use, in percent, not counting buffers and page cache."""
    values = _scan_meminfo(5)
    if values is None:
        return None
    total, free, _available, buffers, cached = values
    if total == 0:
        return None
    return str(_trunc_div(100 * ((total - free) - (buffers + cached)), total))


def ram_total(unused: str | None = None) -> str | None:
    """Total memory."""
    values = _scan_meminfo(1)
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def ram_used(unused: str | None = None) -> str | None:
    """Memory in use, not counting buffers and page cache."""
    values = _scan_meminfo(5)
    if values is None:
        return None
    total, free, _available, buffers, cached = values
    return fmt_human((total - free - buffers - cached) * 1024, 1024)


def _swap_info(*wanted: str) -> dict[str, int] | None:
    """Collect the requested swap fields from meminfo, in kB."""
    text = read_text(MEMINFO)
    if text is None:
        return None
    found: dict[str, int] = {}
    for line in text.splitlines():
        if len(found) == len(wanted):
            break
        for name in _SWAP_KEYS:
            if name in wanted and line.startswith(name):
                match = _SIGNED.match(line, len(name) + 1)
                if match is not None:
                    found[name] = int(match.group(1))
                break
    if len(found) != len(wanted):
        return None
    return found


def swap_free(unused: str | None = None) -> str | None:
    """Free swap space."""
    info = _swap_info("SwapFree")
    if info is None:
        return None
    return fmt_human(info["SwapFree"] * 1024, 1024)


def swap_perc(unused: str | None = None) -> str | None:
    """Swap in use, in percent."""
    info = _swap_info(*_SWAP_KEYS)
    if info is None or info["SwapTotal"] == 0:
        return None
    used = info["SwapTotal"] - info["SwapFree"] - info["SwapCached"]
    return str(_trunc_div(100 * used, info["SwapTotal"]))


def swap_total(unused: str | None = None) -> str | None:
    """Total swap space."""
    info = _swap_info("SwapTotal")
    if info is None:
        return None
    return fmt_human(info["SwapTotal"] * 1024, 1024)


def swap_used(unused: str | None = None) -> str | None:
    """Swap space in use."""
    info = _swap_info(*_SWAP_KEYS)
    if info is None:
        return None
    used = info["SwapTotal"] - info["SwapFree"] - info["SwapCached"]
    return fmt_human(used * 1024, 1024)