"""
# EasyLaTeX: bases.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Base classes for blocks.
"""

import abc
from typing import Optional

from easylatex.exceptions import FixedBaseColumnsMutateException, NonConsumingBlockFeedException
from easylatex.renderers import RenderContext
from easylatex.sources import Line


class Block(abc.ABC):
    """
    Base class for a block, a nested region of input delimited by indentation.

    A block is opened by a directive header line at indentation «open_indent»,
    and remains open for as long as every subsequent non-blank line is indented strictly deeper.
    """
    _open_indent: int

    def __init__(self, open_indent: int):
        self._open_indent = open_indent

    @property
    @abc.abstractmethod
    def kind_name(self) -> str:
        raise NotImplementedError

    @property
    def open_indent(self) -> int:
        return self._open_indent

    @property
    def is_consuming(self) -> bool:
        """
        Whether content lines are fed to the block rather than parsed as headers.
        """
        return False

    def is_closed_by(self, line: 'Line') -> bool:
        return line.indentation_columns <= self._open_indent

    def consume(self, line: 'Line', render_context: 'RenderContext'):
        raise NonConsumingBlockFeedException(
            f'error: line {line.line_number} fed to `{self.kind_name}` block, which does not consume lines'
        )

    def consume_blank_line(self, render_context: 'RenderContext'):
        render_context.write_blank_line()

    @abc.abstractmethod
    def close(self, render_context: 'RenderContext'):
        """
        Emit whatever the block owes the output upon closing.
        """
        raise NotImplementedError


class BlockWithBaseColumns(Block, abc.ABC):
    """
    Base class for a consuming block with a lazily fixed base column.

    The base column is fixed by the indentation of the first content line,
    and that many columns are stripped from every content line thereafter.
    """
    _base_columns: Optional[int]

    def __init__(self, open_indent: int):
        super().__init__(open_indent)
        self._base_columns = None

    @property
    def is_consuming(self) -> bool:
        return True

    @property
    def base_columns(self) -> Optional[int]:
        return self._base_columns

    @base_columns.setter
    def base_columns(self, value: int):
        if self._base_columns is not None:
            raise FixedBaseColumnsMutateException('error: cannot set `base_columns` after it has been fixed')

        self._base_columns = value

    def strip_base_columns(self, line: 'Line') -> str:
        if self._base_columns is None:
            self.base_columns = line.indentation_columns

        return line.strip_columns(self._base_columns)

    def consume(self, line: 'Line', render_context: 'RenderContext'):
        self._consume(self.strip_base_columns(line), render_context)

    @abc.abstractmethod
    def _consume(self, stripped_text: str, render_context: 'RenderContext'):
        """
        Consume a content line, stripped of the base column.
        """
        raise NotImplementedError
