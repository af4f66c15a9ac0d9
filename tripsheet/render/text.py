from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class MeasuringFont(Protocol):
    name: str

    def width(self, text: str, size: float) -> float: ...


class LineBreaker:
    """Greedy word-at-a-time line builder.

    Both measurement and drawing go through ``offer`` so that a height computed
    ahead of time always matches the lines that end up on the page. The width
    budget is passed per word, which lets callers narrow or widen the column
    while a paragraph is being built.
    """

    def __init__(self, font: MeasuringFont, font_size: float) -> None:
        self.font = font
        self.font_size = font_size
        self.current = ''

    def offer(self, word: str, max_width: float) -> str | None:
        candidate = f'{self.current} {word}' if self.current else word
        if self.current and self.font.width(candidate, self.font_size) > max_width:
            committed = self.current
            self.current = word
            return committed
        self.current = candidate
        return None

    def flush(self) -> str | None:
        if not self.current:
            return None
        committed = self.current
        self.current = ''
        return committed


def split_words(text: str | None) -> list[str]:
    return str(text or '').split()


def wrap_to_width(text: str | None, font: MeasuringFont, font_size: float, max_width: float) -> list[str]:
    breaker = LineBreaker(font, font_size)
    lines: list[str] = []
    for word in split_words(text):
        committed = breaker.offer(word, max_width)
        if committed is not None:
            lines.append(committed)
    tail = breaker.flush()
    if tail is not None:
        lines.append(tail)
    return lines


def measure_wrapped_height(
    text: str | None,
    font: MeasuringFont,
    font_size: float,
    max_width: float,
    line_height: float,
) -> float:
    return len(wrap_to_width(text, font, font_size, max_width)) * font_size * line_height


@dataclass(frozen=True)
class WrappedParagraph:
    lines: tuple[str, ...]
    font_name: str
    font_size: float
    line_height: float

    @property
    def line_spacing(self) -> float:
        return self.font_size * self.line_height

    @property
    def height(self) -> float:
        return len(self.lines) * self.line_spacing


def layout_paragraph(
    text: str | None,
    font: MeasuringFont,
    font_size: float,
    max_width: float,
    line_height: float,
) -> WrappedParagraph:
    return WrappedParagraph(
        lines=tuple(wrap_to_width(text, font, font_size, max_width)),
        font_name=font.name,
        font_size=font_size,
        line_height=line_height,
    )
