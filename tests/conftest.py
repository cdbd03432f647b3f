"""Shared fixtures: tiny FIGlet fonts built in memory."""

from pathlib import Path
from typing import Callable, Mapping, Sequence

import pytest

from tui_banner.font.font import Font

FIRST_CODE = 32
LAST_CODE = 126


def build_flf(
    height: int,
    glyphs: Mapping[str, Sequence[str]],
    hardblank: str = '$',
    endmark: str = '@',
    comments: Sequence[str] = (),
) -> str:
    """
    Write FIGlet text for the printable ASCII range.

    Characters missing from ``glyphs`` become two columns of hardblanks.
    """
    lines = [f"flf2a{hardblank} {height} {height} 8 0 {len(comments)}", *comments]
    for code in range(FIRST_CODE, LAST_CODE + 1):
        rows = glyphs.get(chr(code)) or [hardblank * 2] * height
        for i, row in enumerate(rows):
            mark = endmark * 2 if i == height - 1 else endmark
            lines.append(row.replace(' ', hardblank) + mark)
    return '\n'.join(lines) + '\n'


TINY_GLYPHS = {
    'A': ["aa", "aa"],
    'B': ["bb", "bb"],
    'X': ["x ", " x"],
    '?': ["??", "??"],
}


@pytest.fixture
def flf_builder() -> Callable[..., str]:
    """Factory for FIGlet source text."""
    return build_flf


@pytest.fixture
def tiny_flf() -> str:
    """A 2-row font with solid 2x2 A and B glyphs."""
    return build_flf(2, TINY_GLYPHS)


@pytest.fixture
def tiny_font(tiny_flf: str) -> Font:
    return Font.from_figlet_str(tiny_flf)


@pytest.fixture
def tiny_font_file(tmp_path: Path, tiny_flf: str) -> Path:
    path = tmp_path / "tiny.flf"
    path.write_text(tiny_flf, encoding="utf-8")
    return path
