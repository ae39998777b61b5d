"""Keyboard layout and lock indicator formatting."""

from __future__ import annotations

import re

# symbols from the xkb rules configuration that are not layouts
_INVALID = ("evdev", "inet", "pc", "base")
_SEPARATORS = re.compile(r"[+:]")


def valid_layout_or_variant(sym: str) -> bool:
    """Whether ``sym`` names a layout rather than an xkb rules component."""
    return not sym.startswith(_INVALID)


def get_layout(syms: str, grp_num: int) -> str | None:
    """The layout for group ``grp_num`` from an xkb symbols string."""
    layout = None
    group = 0
    for token in filter(None, _SEPARATORS.split(syms)):
        if group > grp_num:
            break
        if not valid_layout_or_variant(token):
            continue
        if len(token) == 1 and token.isdigit():
            # :2, :3, :4 mark additional layout groups
            continue
        layout = token
        group += 1
    return layout


def format_indicators(fmt: str, led_mask: int) -> str:
    """Render caps ('c') and num ('n') lock state according to ``fmt``.

    A letter followed by '?' appears, case preserved, only while its
    indicator is on; otherwise the letter always appears, upper case when
    on and lower case when off.
    """
    fmt = fmt[:4]
    out = []
    for i, char in enumerate(fmt):
        key = char.lower()
        if key not in ("c", "n"):
            continue
        toggle_case = i + 1 >= len(fmt) or fmt[i + 1] != "?"
        is_set = bool(led_mask & (1 << (key == "n")))
        if toggle_case:
            out.append(key.upper() if is_set else key)
        elif is_set:
            out.append(char)
    return "".join(out)