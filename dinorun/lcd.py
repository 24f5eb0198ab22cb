"""In-memory model of a character LCD with a controller-style display RAM."""

from __future__ import annotations

from typing import Iterable, Mapping, Optional, Union

_LINE_LENGTH = 40
_DDRAM_SIZE = 80
_CGRAM_SIZE = 64
_GLYPH_ROWS = 8
_CUSTOM_CHARS = 8


class CharacterLcd:
    """A character display: a ring of display RAM plus eight custom glyphs.

    Each display row starts 40 cells after the previous one in display RAM;
    only the first ``columns`` cells of each row are visible. Writing a custom
    glyph switches data writes to glyph RAM until the cursor is moved again.
    """

    def __init__(self, rows: int = 2, columns: int = 16) -> None:
        if rows not in (1, 2):
            raise ValueError("rows must be 1 or 2")
        max_columns = _DDRAM_SIZE // rows
        if not 1 <= columns <= max_columns:
            raise ValueError(f"columns must be between 1 and {max_columns}")
        self.rows = rows
        self.columns = columns
        self._ddram = bytearray(b" " * _DDRAM_SIZE)
        self._cgram = bytearray(_CGRAM_SIZE)
        self._cursor = 0
        self._cgram_cursor: Optional[int] = None

    @property
    def cursor(self) -> int:
        """Current display RAM address of the cursor."""
        return self._cursor

    @property
    def custom_chars(self) -> tuple[bytes, ...]:
        """The eight custom glyphs, eight pattern rows each."""
        return tuple(
            bytes(self._cgram[i * _GLYPH_ROWS:(i + 1) * _GLYPH_ROWS])
            for i in range(_CUSTOM_CHARS)
        )

    def clear(self) -> None:
        """Blank the display and send the cursor home."""
        self._ddram[:] = b" " * _DDRAM_SIZE
        self._cursor = 0
        self._cgram_cursor = None

    def move_to(self, row: int, column: int) -> None:
        """Place the cursor; the address wraps like the controller's does."""
        steps = (row * _LINE_LENGTH + column) & 0xFF
        self._cursor = steps % _DDRAM_SIZE
        self._cgram_cursor = None

    def put(self, code: Union[int, str]) -> None:
        """Write one character code at the cursor and advance it."""
        value = self._code(code)
        if self._cgram_cursor is not None:
            self._cgram[self._cgram_cursor] = value
            self._cgram_cursor = (self._cgram_cursor + 1) % _CGRAM_SIZE
        else:
            self._ddram[self._cursor] = value
            self._cursor = (self._cursor + 1) % _DDRAM_SIZE

    def write(self, text: str) -> None:
        """Write a string character by character."""
        for char in text:
            self.put(char)

    def create_custom_char(self, index: int, pattern: Iterable[int]) -> None:
        """Define custom glyph ``index`` (0-7) from eight pattern rows."""
        if not 0 <= index < _CUSTOM_CHARS:
            raise ValueError("custom character index must be between 0 and 7")
        rows = list(pattern)
        if len(rows) != _GLYPH_ROWS:
            raise ValueError("a custom character needs exactly 8 rows")
        self._cgram_cursor = index * _GLYPH_ROWS
        for row in rows:
            self.put(row)

    def cell(self, row: int, column: int) -> int:
        """Character code shown at a visible position."""
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            raise IndexError(f"({row}, {column}) is outside the display")
        return self._ddram[row * _LINE_LENGTH + column]

    def visible_rows(self) -> list[bytes]:
        """Character codes of every visible row."""
        return [
            bytes(self._ddram[row * _LINE_LENGTH:row * _LINE_LENGTH + self.columns])
            for row in range(self.rows)
        ]

    def render(self, glyphs: Optional[Mapping[int, str]] = None) -> list[str]:
        """Visible rows as text, drawing codes found in ``glyphs`` with those."""
        glyphs = glyphs or {}
        return ["".join(glyphs.get(code, chr(code)) for code in row) for row in self.visible_rows()]

    @staticmethod
    def _code(code: Union[int, str]) -> int:
        if isinstance(code, str):
            if len(code) != 1:
                raise ValueError("expected a single character")
            code = ord(code)
        if not 0 <= code <= 0xFF:
            raise ValueError(f"character code {code} does not fit in a byte")
        return code