"""Terminal table viewer with row/column selection and colour themes."""

from __future__ import annotations

import argparse
import curses
from dataclasses import dataclass
from typing import Optional, Sequence

from wcwidth import wcwidth

ITEM_HEIGHT = 4
INFO_TEXT = "help <h>"
HEADERS = ("Name", "Address", "Email")
HIGHLIGHT_BAR = " █ "
COLUMN_SPACING = 1


@dataclass(frozen=True)
class Palette:
    """A set of shades of one colour, as 0xRRGGBB values."""

    c200: int
    c400: int
    c600: int
    c900: int
    c950: int


SLATE = Palette(0xE2E8F0, 0x94A3B8, 0x475569, 0x0F172A, 0x020617)
BLUE = Palette(0xBFDBFE, 0x60A5FA, 0x2563EB, 0x1E3A8A, 0x172554)
EMERALD = Palette(0xA7F3D0, 0x34D399, 0x059669, 0x064E3B, 0x022C22)
INDIGO = Palette(0xC7D2FE, 0x818CF8, 0x4F46E5, 0x312E81, 0x1E1B4B)
RED = Palette(0xFECACA, 0xF87171, 0xDC2626, 0x7F1D1D, 0x450A0A)

PALETTES = (BLUE, EMERALD, INDIGO, RED)


@dataclass(frozen=True)
class TableColors:
    """Colours used to draw the table, derived from one palette."""

    buffer_bg: int
    header_bg: int
    header_fg: int
    row_fg: int
    selected_row_style_fg: int
    selected_column_style_fg: int
    selected_cell_style_fg: int
    normal_row_color: int
    alt_row_color: int
    footer_border_color: int

    @classmethod
    def from_palette(cls, palette: Palette) -> "TableColors":
        return cls(
            buffer_bg=SLATE.c950,
            header_bg=palette.c900,
            header_fg=SLATE.c200,
            row_fg=SLATE.c200,
            selected_row_style_fg=palette.c400,
            selected_column_style_fg=palette.c400,
            selected_cell_style_fg=palette.c600,
            normal_row_color=SLATE.c950,
            alt_row_color=SLATE.c900,
            footer_border_color=palette.c400,
        )


@dataclass
class Data:
    """One table row."""

    name: str
    address: str
    email: str

    def as_tuple(self) -> tuple[str, str, str]:
        return (self.name, self.address, self.email)


def _text_width(text: str) -> int:
    return sum(max(wcwidth(ch), 0) for ch in text)


def _lines(text: str) -> list[str]:
    """Split on newlines the way a line iterator does: no trailing empty line, CR stripped."""
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts]


def constraint_len_calculator(items: Sequence[Data]) -> tuple[int, int, int]:
    """Widest name, widest address line and widest email among the items."""
    name_len = max((_text_width(d.name) for d in items), default=0)
    address_len = max(
        (_text_width(line) for d in items for line in _lines(d.address)), default=0
    )
    email_len = max((_text_width(d.email) for d in items), default=0)
    return (name_len % 65536, address_len % 65536, email_len % 65536)


def _fit(text: str, width: int) -> str:
    """Cut text to a display width and pad it with spaces to exactly that width."""
    if width <= 0:
        return ""
    out = []
    used = 0
    for ch in text:
        w = max(wcwidth(ch), 0)
        if used + w > width:
            break
        out.append(ch)
        used += w
    return "".join(out) + " " * (width - used)


_CUBE_LEVELS = (0, 95, 135, 175, 215, 255)
_BASIC_COLORS = (
    (curses.COLOR_BLACK, (0, 0, 0)),
    (curses.COLOR_RED, (205, 0, 0)),
    (curses.COLOR_GREEN, (0, 205, 0)),
    (curses.COLOR_YELLOW, (205, 205, 0)),
    (curses.COLOR_BLUE, (0, 0, 238)),
    (curses.COLOR_MAGENTA, (205, 0, 205)),
    (curses.COLOR_CYAN, (0, 205, 205)),
    (curses.COLOR_WHITE, (229, 229, 229)),
)


def _split_rgb(rgb: int) -> tuple[int, int, int]:
    return (rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF


def _distance(a: tuple[int, int, int], b: tuple[int, int, int]) -> int:
    return sum((x - y) ** 2 for x, y in zip(a, b))


def _xterm256(rgb: int) -> int:
    color = _split_rgb(rgb)
    levels = [min(range(6), key=lambda i: abs(_CUBE_LEVELS[i] - v)) for v in color]
    cube_rgb = tuple(_CUBE_LEVELS[i] for i in levels)
    cube_index = 16 + 36 * levels[0] + 6 * levels[1] + levels[2]
    avg = sum(color) // 3
    grey_step = min(max((avg - 3) // 10, 0), 23)
    grey_value = 8 + 10 * grey_step
    if _distance(color, (grey_value,) * 3) < _distance(color, cube_rgb):
        return 232 + grey_step
    return cube_index


def _basic_color(rgb: int) -> int:
    color = _split_rgb(rgb)
    return min(_BASIC_COLORS, key=lambda item: _distance(color, item[1]))[0]


class App:
    """Table state and the terminal loop that drives it."""

    def __init__(self, items: Optional[Sequence[Data]] = None) -> None:
        self.items: list[Data] = list(items or [])
        self.selected_row: Optional[int] = 0
        self.selected_column: Optional[int] = None
        self.longest_item_lens = constraint_len_calculator(self.items)
        self.scroll_content_length = max(len(self.items) - 1, 0) * ITEM_HEIGHT
        self.scroll_position = 0
        self.color_index = 0
        self.colors = TableColors.from_palette(PALETTES[0])
        self._offset = 0
        self._pairs: dict[tuple[int, int], int] = {}
        self._color_ok = False
        self._max_pairs = 0
        self._color_count = 0

    # --- state changes -------------------------------------------------

    def _select_row(self, index: int) -> None:
        self.selected_row = index
        self.scroll_position = index * ITEM_HEIGHT

    def next_row(self) -> None:
        last = max(len(self.items) - 1, 0)
        if self.selected_row is None or self.selected_row >= last:
            self._select_row(0)
        else:
            self._select_row(self.selected_row + 1)

    def previous_row(self) -> None:
        last = max(len(self.items) - 1, 0)
        if self.selected_row is None:
            self._select_row(0)
        elif self.selected_row == 0:
            self._select_row(last)
        else:
            self._select_row(self.selected_row - 1)

    def next_column(self) -> None:
        if self.selected_column is None:
            self.selected_column = 0
        else:
            self.selected_column = min(self.selected_column + 1, len(HEADERS) - 1)

    def previous_column(self) -> None:
        if self.selected_column is None:
            self.selected_column = len(HEADERS) - 1
        else:
            self.selected_column = max(self.selected_column - 1, 0)

    def next_color(self) -> None:
        self.color_index = (self.color_index + 1) % len(PALETTES)

    def previous_color(self) -> None:
        count = len(PALETTES)
        self.color_index = (self.color_index + count - 1) % count

    def set_colors(self) -> None:
        self.colors = TableColors.from_palette(PALETTES[self.color_index])

    def handle_key(self, key: str, shift: bool) -> bool:
        """Apply one key press; return False when the app should quit."""
        if key in ("q", "esc"):
            return False
        if key in ("j", "down"):
            self.next_row()
        elif key in ("k", "up"):
            self.previous_row()
        elif key in ("l", "right"):
            if shift:
                self.next_color()
            else:
                self.next_column()
        elif key in ("h", "left"):
            if shift:
                self.previous_color()
            else:
                self.previous_column()
        return True

    # --- terminal loop -------------------------------------------------

    def run(self, screen) -> None:
        """Draw and handle keys on a curses screen until asked to quit."""
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        screen.keypad(True)
        self._init_colors()
        while True:
            self._draw(screen)
            key, shift = _translate_key(screen.get_wch())
            if not self.handle_key(key, shift):
                return

    def _init_colors(self) -> None:
        self._color_ok = curses.has_colors()
        if not self._color_ok:
            return
        curses.start_color()
        self._max_pairs = curses.COLOR_PAIRS
        self._color_count = curses.COLORS

    def _term_color(self, rgb: int) -> int:
        if self._color_count >= 256:
            return _xterm256(rgb)
        return _basic_color(rgb)

    def _attr(self, fg: int, bg: int, reverse: bool = False) -> int:
        attr = curses.A_REVERSE if reverse else curses.A_NORMAL
        if not self._color_ok:
            return attr
        key = (fg, bg)
        pair = self._pairs.get(key)
        if pair is None:
            pair = len(self._pairs) + 1
            if pair >= self._max_pairs:
                return attr
            curses.init_pair(pair, self._term_color(fg), self._term_color(bg))
            self._pairs[key] = pair
        return attr | curses.color_pair(pair)

    @staticmethod
    def _put(screen, y: int, x: int, text: str, attr: int) -> None:
        try:
            screen.addstr(y, x, text, attr)
        except curses.error:
            pass

    def _draw(self, screen) -> None:
        self.set_colors()
        height, width = screen.getmaxyx()
        screen.erase()
        table_height = max(height - ITEM_HEIGHT, min(height, 5))
        footer_height = height - table_height
        self._render_table(screen, 0, table_height, width)
        self._render_scrollbar(screen, 0, table_height, width)
        self._render_footer(screen, table_height, footer_height, width)
        screen.refresh()

    def _column_widths(self, width: int) -> list[int]:
        name_len, address_len, email_len = self.longest_item_lens
        available = max(width - COLUMN_SPACING * (len(HEADERS) - 1), 0)
        first = min(name_len + 1, available)
        rest = available - first
        second_min, third_min = address_len + 1, email_len
        if rest >= second_min + third_min:
            extra = rest - second_min - third_min
            second = second_min + extra // 2 + extra % 2
            third = third_min + extra // 2
        else:
            second = min(second_min, rest)
            third = rest - second
        return [first, second, third]

    def _render_row(self, screen, y, width, cells, base_attr, symbol, attrs, widths):
        self._put(screen, y, 0, _fit("", width), base_attr)
        self._put(screen, y, 0, _fit(symbol, len(HIGHLIGHT_BAR)), base_attr)
        x = len(HIGHLIGHT_BAR)
        for text, attr, col_width in zip(cells, attrs, widths):
            if x >= width:
                break
            self._put(screen, y, x, _fit(text, min(col_width, width - x)), attr)
            x += col_width + COLUMN_SPACING

    def _render_table(self, screen, top: int, height: int, width: int) -> None:
        colors = self.colors
        if height <= 0:
            return
        for y in range(top, top + height):
            self._put(screen, y, 0, _fit("", width), self._attr(colors.row_fg, colors.buffer_bg))

        widths = self._column_widths(width - len(HIGHLIGHT_BAR))
        header_attr = self._attr(colors.header_fg, colors.header_bg)
        self._render_row(
            screen, top, width, HEADERS, header_attr, "", [header_attr] * len(HEADERS), widths
        )

        visible = max((height - 1) // ITEM_HEIGHT, 1)
        if self.selected_row is not None:
            selected = min(self.selected_row, max(len(self.items) - 1, 0))
            if selected < self._offset:
                self._offset = selected
            elif selected >= self._offset + visible:
                self._offset = selected - visible + 1

        for index in range(self._offset, min(len(self.items), self._offset + visible)):
            row_top = top + 1 + (index - self._offset) * ITEM_HEIGHT
            bg = colors.normal_row_color if index % 2 == 0 else colors.alt_row_color
            is_selected = index == self.selected_row
            row_fg = colors.selected_row_style_fg if is_selected else colors.row_fg
            row_attr = self._attr(row_fg, bg, is_selected)
            cell_attrs = []
            for col in range(len(HEADERS)):
                fg, reverse = row_fg, is_selected
                if col == self.selected_column:
                    fg = colors.selected_column_style_fg
                    if is_selected:
                        fg, reverse = colors.selected_cell_style_fg, True
                cell_attrs.append(self._attr(fg, bg, reverse))
            cell_lines = [
                (["", *_lines(text), ""] + [""] * ITEM_HEIGHT)[:ITEM_HEIGHT]
                for text in self.items[index].as_tuple()
            ]
            symbols = ["", HIGHLIGHT_BAR, HIGHLIGHT_BAR, ""] if is_selected else [""] * ITEM_HEIGHT
            for line_no in range(ITEM_HEIGHT):
                y = row_top + line_no
                if y >= top + height:
                    break
                self._render_row(
                    screen,
                    y,
                    width,
                    [lines[line_no] for lines in cell_lines],
                    row_attr,
                    symbols[line_no],
                    cell_attrs,
                    widths,
                )

    def _render_scrollbar(self, screen, top: int, height: int, width: int) -> None:
        track_top, track_len, x = top + 1, height - 2, width - 2
        if self.scroll_content_length == 0 or track_len <= 0 or x < 0:
            return
        attr = self._attr(self.colors.row_fg, self.colors.buffer_bg)
        content = self.scroll_content_length
        thumb_len = max(1, track_len * track_len // (content + track_len))
        position = min(self.scroll_position, content)
        thumb_start = round(position * (track_len - thumb_len) / content)
        for offset in range(track_len):
            inside = thumb_start <= offset < thumb_start + thumb_len
            self._put(screen, track_top + offset, x, "█" if inside else "║", attr)

    def _render_footer(self, screen, top: int, height: int, width: int) -> None:
        if height <= 0:
            return
        colors = self.colors
        base = self._attr(colors.row_fg, colors.buffer_bg)
        for y in range(top, top + height):
            self._put(screen, y, 0, _fit("", width), base)
        bottom = top + height - 1
        self._put(screen, bottom, 0, "━" * width, self._attr(colors.footer_border_color, colors.buffer_bg))
        title = _fit(INFO_TEXT, min(_text_width(INFO_TEXT), width))
        self._put(screen, bottom, max((width - _text_width(title)) // 2, 0), title, base)


_SPECIAL_KEYS = {
    curses.KEY_DOWN: ("down", False),
    curses.KEY_UP: ("up", False),
    curses.KEY_LEFT: ("left", False),
    curses.KEY_RIGHT: ("right", False),
    curses.KEY_SLEFT: ("left", True),
    curses.KEY_SRIGHT: ("right", True),
}


def _translate_key(key) -> tuple[str, bool]:
    if isinstance(key, str):
        return ("esc", False) if key == "\x1b" else (key, False)
    return _SPECIAL_KEYS.get(key, ("", False))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="lumberjack", description="Browse tabular records in the terminal."
    )
    parser.parse_args(argv)
    curses.wrapper(lambda screen: App().run(screen))
    return 0