"""Helpers shared by the status components."""

from __future__ import annotations

import os
import sys

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}


def warn(message: str) -> None:
    """Write a diagnostic line to standard error."""
    print(message, file=sys.stderr, flush=True)


def fmt_human(num: float, base: int) -> str:
    """Scale ``num`` by ``base`` and render it with one decimal and a unit prefix."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: Invalid base {base!r}") from None

    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def read_text(path: str | os.PathLike[str]) -> str | None:
    """Return the whole content of ``path``, or None (with a warning) if it cannot be read."""
    try:
        with open(path, encoding="utf-8", errors="replace") as fh:
            return fh.read()
    except OSError as exc:
        warn(f"fopen '{os.fspath(path)}': {exc.strerror or exc}")
        return None