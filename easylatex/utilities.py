"""
# EasyLaTeX: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

import re
from typing import NamedTuple

from easylatex.constants import DEFAULT_TAB_WIDTH


class Indentation(NamedTuple):
    columns: int
    offset: int


def compute_indentation(line: str, tab_width: int = DEFAULT_TAB_WIDTH) -> 'Indentation':
    """
    Compute the indentation of a line.

    Returns («columns», «offset»), where «columns» is the width of the leading run of spaces and tabs
    (a space counts 1, a tab counts `tab_width`) and «offset» is the index of the first content character.
    """
    columns = 0
    offset = 0

    for character in line:
        if character == ' ':
            columns += 1
        elif character == '\t':
            columns += tab_width
        else:
            break
        offset += 1

    return Indentation(columns, offset)


def strip_columns(line: str, column_count: int, tab_width: int = DEFAULT_TAB_WIDTH) -> str:
    """
    Strip up to «column_count» columns of leading indentation from a line.

    A tab that would overshoot «column_count» is kept, as is everything after it.
    Lines with less indentation than «column_count» are stripped as far as possible.
    """
    columns = 0
    offset = 0

    for character in line:
        if columns >= column_count:
            break

        if character == ' ':
            width = 1
        elif character == '\t':
            width = tab_width
        else:
            break

        if columns + width > column_count:
            break

        columns += width
        offset += 1

    return line[offset:]


def strip_line_ending(line: str) -> str:
    return line.rstrip(' \t\r\n')


def left_trim(string: str) -> str:
    return string.lstrip(' \t')


def is_whitespace_only(string: str) -> bool:
    return bool(re.fullmatch(pattern=r'[\s]*', string=string, flags=re.ASCII))
