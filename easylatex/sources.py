"""
# EasyLaTeX: sources.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Line sources with single-line pushback.
"""

from typing import Iterable, Iterator, Optional

from easylatex.constants import DEFAULT_TAB_WIDTH
from easylatex.exceptions import OccupiedPushbackException
from easylatex.utilities import compute_indentation, is_whitespace_only, strip_columns, strip_line_ending


class Line:
    """
    One input record, with its line ending and trailing whitespace removed.
    """
    _text: str
    _line_number: int
    _tab_width: int
    _indentation_columns: int
    _content: str

    def __init__(self, text: str, line_number: int, tab_width: int = DEFAULT_TAB_WIDTH):
        self._text = strip_line_ending(text)
        self._line_number = line_number
        self._tab_width = tab_width

        indentation = compute_indentation(self._text, tab_width)
        self._indentation_columns = indentation.columns
        self._content = self._text[indentation.offset:]

    def __repr__(self) -> str:
        return f'Line({self._text!r}, line_number={self._line_number})'

    @property
    def text(self) -> str:
        return self._text

    @property
    def line_number(self) -> int:
        return self._line_number

    @property
    def indentation_columns(self) -> int:
        return self._indentation_columns

    @property
    def content(self) -> str:
        return self._content

    @property
    def is_blank(self) -> bool:
        return is_whitespace_only(self._content)

    def strip_columns(self, column_count: int) -> str:
        return strip_columns(self._text, column_count, self._tab_width)


class LineSource:
    """
    Object producing the lines of an input stream, one at a time.

    A line taken while deciding whether a construct continues may be handed back with `push_back(line)`,
    in which case it is the next line produced by `take()`.
    There is exactly one pushback slot; pushing back into an occupied slot is an error.
    """
    _records: Iterator[str]
    _tab_width: int
    _line_count: int
    _pushed_back_line: Optional['Line']

    def __init__(self, records: Iterable[str], tab_width: int = DEFAULT_TAB_WIDTH):
        self._records = iter(records)
        self._tab_width = tab_width
        self._line_count = 0
        self._pushed_back_line = None

    def __iter__(self) -> Iterator['Line']:
        while True:
            line = self.take()
            if line is None:
                return

            yield line

    @property
    def tab_width(self) -> int:
        return self._tab_width

    def take(self) -> Optional['Line']:
        """
        Take the next line, or None at end of input.
        """
        if self._pushed_back_line is not None:
            line = self._pushed_back_line
            self._pushed_back_line = None
            return line

        try:
            record = next(self._records)
        except StopIteration:
            return None

        self._line_count += 1

        return Line(record, self._line_count, self._tab_width)

    def peek(self) -> Optional['Line']:
        line = self.take()
        if line is not None:
            self.push_back(line)

        return line

    def push_back(self, line: 'Line'):
        if self._pushed_back_line is not None:
            raise OccupiedPushbackException(
                f'error: cannot push back line {line.line_number} '
                f'while line {self._pushed_back_line.line_number} is pending'
            )

        self._pushed_back_line = line
