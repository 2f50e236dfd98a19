"""
# EasyLaTeX: renderers.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Render state for a single conversion run.
"""

import sys
from typing import Optional, TextIO

from easylatex.constants import DEFAULT_PREAMBLE, DOCUMENT_CLOSING
from easylatex.idioms import escape_argument_line_breaks, escape_line_breaks


class RenderContext:
    """
    Object through which all output of a conversion run is emitted.

    The preamble is emitted exactly once, immediately before the first non-blank output,
    and if it was ever emitted, `finish()` emits the closing marker.
    A RenderContext is created per run and never reused.
    """
    _output: TextIO
    _preamble: str
    _preamble_emitted: bool
    _is_finished: bool
    _verbose_mode_enabled: bool
    _trace_stream: TextIO

    def __init__(self, output: TextIO, verbose_mode_enabled: bool = False, preamble: str = DEFAULT_PREAMBLE,
                 trace_stream: Optional[TextIO] = None):
        self._output = output
        self._preamble = preamble
        self._preamble_emitted = False
        self._is_finished = False
        self._verbose_mode_enabled = verbose_mode_enabled
        self._trace_stream = trace_stream if trace_stream is not None else sys.stderr

    @property
    def preamble_emitted(self) -> bool:
        return self._preamble_emitted

    def ensure_preamble(self):
        if self._preamble_emitted:
            return

        self._output.write(self._preamble)
        self._preamble_emitted = True

    def write(self, latex: str):
        self.ensure_preamble()
        self._output.write(latex)

    def write_blank_line(self):
        self._output.write('\n')

    def write_line(self, latex: str):
        """
        Write LaTeX unchanged, terminated with a newline.
        """
        self.write(latex + '\n')

    def write_text_line(self, text: str):
        self.write(escape_line_breaks(text) + '\n')

    def write_list_item(self, text: str):
        self.write('\\item ' + escape_line_breaks(text) + '\n')

    def write_command(self, name: str, args: str = ''):
        self.write(f'\\{name}{args}\n')

    def write_braced_command(self, name: str, body: str):
        self.write(f'\\{name}{{{escape_argument_line_breaks(body)}}}\n')

    def write_block(self, latex: str):
        """
        Write a multi-line chunk, ensuring it ends with a newline.
        """
        if latex != '' and not latex.endswith('\n'):
            latex += '\n'

        self.write(latex)

    def finish(self):
        if self._is_finished:
            return

        if self._preamble_emitted:
            self._output.write(DOCUMENT_CLOSING)

        self._is_finished = True

    def trace(self, line_number: int, message: str):
        if self._verbose_mode_enabled:
            print(f'verbose: line {line_number}: {message}', file=self._trace_stream)
