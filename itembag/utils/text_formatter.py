# itembag/utils/text_formatter.py
import re
from typing import Callable, List

_FORMAT_CODE_RE = re.compile(r"\[\[[A-Z_]*/?\]\]")

def strip_format_codes(text: str) -> str:
    """Removes [[COLOR]] / [[/]] markers, for plain output such as logs."""
    return _FORMAT_CODE_RE.sub("", text)

def wrap_text(text: str, max_width: int, measure: Callable[[str], int]) -> List[str]:
    """
    Greedy word wrap. `measure` returns the pixel width of a string
    (e.g. lambda s: font.size(s)[0]). A single word wider than max_width
    gets its own line.
    """
    lines: List[str] = []
    for paragraph in text.split("\n"):
        current = ""
        for word in paragraph.split():
            candidate = f"{current} {word}" if current else word
            if current and measure(candidate) > max_width:
                lines.append(current)
                current = word
            else:
                current = candidate
        lines.append(current)
    return lines
