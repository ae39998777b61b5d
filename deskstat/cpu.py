"""Processor frequency and usage components."""

from __future__ import annotations

import re

from .util import fmt_human, read_text

CPU_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
STAT = "/proc/stat"

_UINT = re.compile(r"\s*\+?(\d+)")
_BUSY = (0, 1, 2, 5, 6)  # user nice system irq softirq


def cpu_freq(unused: str | None = None) -> str | None:
    """Current frequency of the first processor."""
    text = read_text(CPU_FREQ)
    if text is None:
        return None
    match = _UINT.match(text)
    if match is None:
        return None
    return fmt_human(int(match.group(1)) * 1000, 1000)


class CpuUsage:
    """Processor usage in percent since the previous call."""

    def __init__(self, stat_path: str | None = None) -> None:
        self.stat_path = stat_path
        self._sample: list[float] = [0.0] * 7

    def _read(self) -> list[float] | None:
        text = read_text(self.stat_path or STAT)
        if text is None:
            return None
        fields = text.split()[1:8]
        if len(fields) != 7:
            return None
        try:
            return [float(value) for value in fields]
        except ValueError:
            return None

    def __call__(self, unused: str | None = None) -> str | None:
        previous = self._sample
        current = self._read()
        if current is None:
            return None
        self._sample = current
        if previous[0] == 0:
            return None
        total = sum(previous) - sum(current)
        if total == 0:
            return None
        busy = sum(previous[i] for i in _BUSY) - sum(current[i] for i in _BUSY)
        return str(int(100 * busy / total))


_usage = CpuUsage()


def cpu_perc(unused: str | None = None) -> str | None:
    """Processor usage in percent since the previous call."""
    return _usage(unused)