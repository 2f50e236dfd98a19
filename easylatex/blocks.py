"""
# EasyLaTeX: blocks.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Block kinds: environments, raw LaTeX, math, and code.
"""

from typing import Optional

from easylatex.bases import Block, BlockWithBaseColumns
from easylatex.constants import (
    MATH_CLOSING,
    MATH_OPENING,
    MATH_ROW_SEPARATOR,
    MATH_SPACED_ROW_SEPARATOR,
    VERBATIM_CLOSING,
    VERBATIM_OPENING,
)
from easylatex.executors import CodeExecutor
from easylatex.idioms import RAW_BLOCK_KEYWORD, is_list_environment, split_math_rows
from easylatex.renderers import RenderContext
from easylatex.utilities import left_trim


class EnvironmentBlock(Block):
    """
    A LaTeX environment, `\\begin{«name»}«args»` through `\\end{«name»}`.

    Content lines are parsed as usual;
    inside a list environment, bare text lines become `\\item`s.
    """
    _name: str
    _is_list: bool

    def __init__(self, name: str, open_indent: int):
        super().__init__(open_indent)
        self._name = name
        self._is_list = is_list_environment(name)

    @property
    def kind_name(self) -> str:
        return f'environment `{self._name}`'

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_list(self) -> bool:
        return self._is_list

    def open(self, args: str, render_context: 'RenderContext'):
        render_context.write_line(f'\\begin{{{self._name}}}{args}')

    def close(self, render_context: 'RenderContext'):
        render_context.write_line(f'\\end{{{self._name}}}')


class RawBlock(BlockWithBaseColumns):
    """
    Raw LaTeX, passed through verbatim (less the base column) as it is consumed.
    """
    @property
    def kind_name(self) -> str:
        return 'raw'

    def _consume(self, stripped_text: str, render_context: 'RenderContext'):
        render_context.write_line(stripped_text)

    def close(self, render_context: 'RenderContext'):
        pass


class MathRowAccumulator:
    """
    Object holding at most one pending row of math.

    Each new row finalises the pending row with the inter-row separator.
    A blank line finalises the pending row with the spaced separator instead.
    On closing, the pending row is flushed without any separator.
    Methods return the LaTeX finalised, if any.
    """
    _pending_row: Optional[str]

    def __init__(self):
        self._pending_row = None

    @property
    def pending_row(self) -> Optional[str]:
        return self._pending_row

    def feed(self, text: str) -> str:
        latex = ''

        for row in split_math_rows(text):
            if self._pending_row is not None:
                latex += self._pending_row + MATH_ROW_SEPARATOR
            self._pending_row = row

        return latex

    def break_rows(self) -> str:
        if self._pending_row is None:
            return ''

        latex = self._pending_row + MATH_SPACED_ROW_SEPARATOR
        self._pending_row = None

        return latex

    def flush(self) -> str:
        if self._pending_row is None:
            return ''

        latex = self._pending_row + '\n'
        self._pending_row = None

        return latex


class MathBlock(BlockWithBaseColumns):
    """
    Display math, wrapped as an `aligned` environment inside `\\[ ... \\]`.

    Each content line is split on `\\n` escapes into rows.
    A content line consisting of `latex:` alone sets a sticky flag and produces no output;
    the flag does not currently alter how later lines are processed.
    """
    _row_accumulator: 'MathRowAccumulator'
    _raw_sticky: bool

    def __init__(self, open_indent: int):
        super().__init__(open_indent)
        self._row_accumulator = MathRowAccumulator()
        self._raw_sticky = False

    @property
    def kind_name(self) -> str:
        return 'math'

    @property
    def raw_sticky(self) -> bool:
        return self._raw_sticky

    def open(self, render_context: 'RenderContext'):
        render_context.write(MATH_OPENING)

    def _consume(self, stripped_text: str, render_context: 'RenderContext'):
        text = left_trim(stripped_text)

        if text == f'{RAW_BLOCK_KEYWORD}:':
            self._raw_sticky = True
            return

        latex = self._row_accumulator.feed(text)
        if latex != '':
            render_context.write(latex)

    def consume_blank_line(self, render_context: 'RenderContext'):
        latex = self._row_accumulator.break_rows()
        if latex != '':
            render_context.write(latex)

    def close(self, render_context: 'RenderContext'):
        render_context.write(self._row_accumulator.flush() + MATH_CLOSING)


class CodeBlock(BlockWithBaseColumns):
    """
    Python code, executed upon closing, with its captured output spliced into the document.

    With `results_mode_is_direct`, the output is emitted as is (as LaTeX);
    otherwise it is wrapped in a verbatim environment.
    """
    _results_mode_is_direct: bool
    _code_executor: 'CodeExecutor'
    _source_lines: list[str]

    def __init__(self, open_indent: int, results_mode_is_direct: bool, code_executor: 'CodeExecutor'):
        super().__init__(open_indent)
        self._results_mode_is_direct = results_mode_is_direct
        self._code_executor = code_executor
        self._source_lines = []

    @property
    def kind_name(self) -> str:
        return 'python'

    @property
    def results_mode_is_direct(self) -> bool:
        return self._results_mode_is_direct

    @property
    def accumulated_source(self) -> str:
        return ''.join(f'{source_line}\n' for source_line in self._source_lines)

    def _consume(self, stripped_text: str, render_context: 'RenderContext'):
        self._source_lines.append(stripped_text)

    def close(self, render_context: 'RenderContext'):
        output = self._code_executor.execute(self.accumulated_source)
        self._source_lines = []

        if self._results_mode_is_direct:
            render_context.write_block(output)
        else:
            render_context.write(VERBATIM_OPENING)
            render_context.write_block(output)
            render_context.write(VERBATIM_CLOSING)
