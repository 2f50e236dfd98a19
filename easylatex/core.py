"""
# EasyLaTeX: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core conversion logic.

EasyLaTeX documents are converted in a single sequential pass, one line at a time,
with the structure of the document given by indentation.
For details on how lines are dispatched, see class `BlockAuthority` in `authorities.py`.
"""

import io
from typing import Iterable, Optional, TextIO

from easylatex.authorities import BlockAuthority
from easylatex.constants import DEFAULT_PREAMBLE, DEFAULT_TAB_WIDTH
from easylatex.executors import CodeExecutor, SubprocessCodeExecutor
from easylatex.renderers import RenderContext
from easylatex.sources import LineSource


def convert_stream(records: Iterable[str], output: TextIO, tab_width: int = DEFAULT_TAB_WIDTH,
                   code_executor: Optional['CodeExecutor'] = None, verbose_mode_enabled: bool = False,
                   preamble: str = DEFAULT_PREAMBLE, trace_stream: Optional[TextIO] = None):
    """
    Convert EasyLaTeX records (lines) to LaTeX, writing to «output» as decisions are made.
    """
    if code_executor is None:
        code_executor = SubprocessCodeExecutor()

    line_source = LineSource(records, tab_width)
    render_context = RenderContext(output, verbose_mode_enabled, preamble, trace_stream)
    block_authority = BlockAuthority(line_source, render_context, code_executor)
    block_authority.execute()


def easylatex_to_latex(easylatex: str, tab_width: int = DEFAULT_TAB_WIDTH,
                       code_executor: Optional['CodeExecutor'] = None, verbose_mode_enabled: bool = False) -> str:
    """
    Convert EasyLaTeX to LaTeX.
    """
    output = io.StringIO()
    convert_stream(io.StringIO(easylatex), output, tab_width, code_executor, verbose_mode_enabled)

    return output.getvalue()
