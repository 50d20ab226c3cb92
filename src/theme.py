"""Color & style helpers for the conversation output.

Decisions:
- Core modules render plain text; colour is applied here, by the loop only.
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disabled when stdout is not a TTY unless FORCE_COLOR=1.
- Palette comes from Settings (TASKNOOK_COLOR_* overrides).
"""
from __future__ import annotations
import os
import re
import sys
from typing import Dict, Mapping, Optional

TASK_TAG_RE = re.compile(r"\[([TDE])\]\[([X ])\]")
KIND_PALETTE_KEYS = {"T": "todo", "D": "deadline", "E": "event"}

RESET = "\033[0m"
BOLD = "\033[1m"


def _hex_to_rgb(hex_code: str) -> tuple[int, int, int]:
    h = hex_code.lstrip('#')
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _fg_truecolor(r: int, g: int, b: int) -> str:
    return f"\033[38;2;{r};{g};{b}m"


def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    r6, g6, b6 = to_6(r), to_6(g), to_6(b)
    idx = 16 + 36 * r6 + 6 * g6 + b6
    return f"\033[38;5;{idx}m"


def color_supported(requested: bool = True) -> bool:
    force = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
    return requested and (force or sys.stdout.isatty())


class Theme:
    def __init__(self, palette: Mapping[str, str], enabled: bool = True, truecolor: Optional[bool] = None):
        self.enabled = enabled
        if truecolor is None:
            colorterm = os.environ.get("COLORTERM", "").lower()
            truecolor = any(tok in colorterm for tok in ("truecolor", "24bit"))
        self.truecolor = truecolor
        self.codes: Dict[str, str] = {name: self._from_hex(h) for name, h in palette.items()}

    def _from_hex(self, hex_code: str) -> str:
        if not self.enabled:
            return ''
        r, g, b = _hex_to_rgb(hex_code)
        if self.truecolor:
            return _fg_truecolor(r, g, b)
        return _fg_256(r, g, b)

    def color(self, text: str, *styles: str) -> str:
        if not self.enabled:
            return text
        return ''.join(styles) + text + RESET

    def task_lines(self, text: str) -> str:
        """Colour the [kind][status] tag of every rendered task in text."""
        if not self.enabled:
            return text

        def _paint(m: re.Match) -> str:
            kind, icon = m.group(1), m.group(2)
            tag = self.color(f"[{kind}]", self.codes.get(KIND_PALETTE_KEYS[kind], ''), BOLD)
            mark = self.color(f"[{icon}]", self.codes.get("done", '')) if icon == "X" else f"[{icon}]"
            return tag + mark

        return TASK_TAG_RE.sub(_paint, text)

    def error(self, text: str) -> str:
        return self.color(text, self.codes.get("error", ''))
