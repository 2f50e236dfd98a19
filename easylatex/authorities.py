"""
# EasyLaTeX: authorities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

The higher power that governs the conversion logic.
"""

from typing import Optional

from easylatex.bases import Block
from easylatex.blocks import CodeBlock, EnvironmentBlock, MathBlock, RawBlock
from easylatex.constants import ARGUMENT_BODY_SEPARATOR
from easylatex.executors import CodeExecutor
from easylatex.headers import HeaderParseResult, parse_header
from easylatex.idioms import (
    CODE_BLOCK_KEYWORD,
    MATH_BLOCK_KEYWORD,
    RAW_BLOCK_KEYWORD,
    compute_results_mode_is_direct,
    is_braced_command,
    is_known_environment,
    is_no_body_command,
    is_recognised_header_name,
    is_title_command,
    looks_like_command_call,
    strip_list_marker,
)
from easylatex.renderers import RenderContext
from easylatex.sources import Line, LineSource
from easylatex.utilities import left_trim


class BlockAuthority:
    """
    Object governing the opening and closing of blocks, line by line.

    ## Closing

    Before anything else is done with a non-blank line,
    every open block whose opening indentation is not strictly less than the line's indentation
    is closed, innermost first.
    Blank lines never close blocks.

    ## Dispatch

    If the innermost open block is consuming (raw, math, or code), the line is fed to it.
    Otherwise the line is parsed as a directive header, which may:
    - open a block (`latex:`, `math:`, `python:`, or a known environment),
    - emit a command (no-body, braced, or title commands), or
    - be unrecognised, in which case the line is literal text.
    Lines that are not headers are literal LaTeX (leading backslash), implicit commands,
    list items (inside a list environment), or plain text.
    """
    _line_source: 'LineSource'
    _render_context: 'RenderContext'
    _code_executor: 'CodeExecutor'
    _block_stack: list['Block']

    def __init__(self, line_source: 'LineSource', render_context: 'RenderContext', code_executor: 'CodeExecutor'):
        self._line_source = line_source
        self._render_context = render_context
        self._code_executor = code_executor
        self._block_stack = []

    @property
    def block_stack(self) -> list['Block']:
        return self._block_stack

    def top_block(self) -> Optional['Block']:
        if len(self._block_stack) == 0:
            return None

        return self._block_stack[-1]

    def inside_list_environment(self) -> bool:
        top_block = self.top_block()
        return isinstance(top_block, EnvironmentBlock) and top_block.is_list

    def push_block(self, block: 'Block', line: 'Line'):
        self._render_context.trace(
            line.line_number,
            f'open {block.kind_name} block at indentation {block.open_indent}',
        )
        self._block_stack.append(block)

    def close_top_block(self, line_number: int):
        block = self._block_stack.pop()
        self._render_context.trace(line_number, f'close {block.kind_name} block')
        block.close(self._render_context)

    def close_blocks_for(self, line: 'Line'):
        while len(self._block_stack) > 0 and self._block_stack[-1].is_closed_by(line):
            self.close_top_block(line.line_number)

    def close_all_blocks(self, line_number: int):
        while len(self._block_stack) > 0:
            self.close_top_block(line_number)

    def execute(self):
        """
        Convert every line of the source, then close all blocks and finish the document.
        """
        last_line_number = 0

        for line in self._line_source:
            last_line_number = line.line_number
            self.process_line(line)

        self.close_all_blocks(last_line_number)
        self._render_context.finish()

    def process_line(self, line: 'Line'):
        if line.is_blank:
            self.process_blank_line()
            return

        self.close_blocks_for(line)

        top_block = self.top_block()
        if top_block is not None and top_block.is_consuming:
            top_block.consume(line, self._render_context)
            return

        header = parse_header(line.content)
        if header is None:
            self.process_literal_line(line)
            return

        if not is_recognised_header_name(header.name):
            self._render_context.write_text_line(line.content)
            return

        self.dispatch_header(line, header)

    def process_blank_line(self):
        top_block = self.top_block()
        if top_block is None:
            self._render_context.write_blank_line()
        else:
            top_block.consume_blank_line(self._render_context)

    def dispatch_header(self, line: 'Line', header: 'HeaderParseResult'):
        name = header.name
        self._render_context.trace(line.line_number, f'directive `{name}`')

        if is_no_body_command(name):
            self.process_no_body_command(line, header)
        elif is_braced_command(name):
            self.process_braced_command(line, header)
        elif is_title_command(name):
            self.process_title_command(line, header)
        elif name == RAW_BLOCK_KEYWORD:
            self.push_block(RawBlock(line.indentation_columns), line)
        elif name == MATH_BLOCK_KEYWORD:
            math_block = MathBlock(line.indentation_columns)
            math_block.open(self._render_context)
            self.push_block(math_block, line)
        elif name == CODE_BLOCK_KEYWORD:
            results_mode_is_direct = compute_results_mode_is_direct(header.args_before)
            code_block = CodeBlock(line.indentation_columns, results_mode_is_direct, self._code_executor)
            self.push_block(code_block, line)
        elif is_known_environment(name):
            environment_block = EnvironmentBlock(name, line.indentation_columns)
            environment_block.open(header.args_before, self._render_context)
            self.push_block(environment_block, line)
            if header.inline_after != '':
                self._render_context.write_text_line(header.inline_after)

    def take_next_non_blank_line(self) -> Optional['Line']:
        while True:
            line = self._line_source.take()
            if line is None or not line.is_blank:
                return line

    def skip_deeper_lines(self, header_line: 'Line'):
        """
        Discard blank lines and lines deeper than the header line,
        pushing back the first line that is not.
        """
        while True:
            line = self.take_next_non_blank_line()
            if line is None:
                return

            if line.indentation_columns <= header_line.indentation_columns:
                self._line_source.push_back(line)
                return

            self._render_context.trace(line.line_number, 'discard line under body-less directive')

    def process_no_body_command(self, line: 'Line', header: 'HeaderParseResult'):
        self._render_context.write_command(header.name)
        self.skip_deeper_lines(line)

    def process_braced_command(self, line: 'Line', header: 'HeaderParseResult'):
        """
        Process a command taking a single braced argument.

        With inline arguments (`«name»«args»:`), emit `\\«name»«args»` and discard any body.
        Otherwise the argument is the inline text (if any) followed by every deeper line,
        joined with forced line breaks.
        """
        if header.args_before != '':
            self._render_context.write_command(header.name, header.args_before)
            self.skip_deeper_lines(line)
            return

        body_segments = []
        if header.inline_after != '':
            body_segments.append(header.inline_after)

        while True:
            body_line = self.take_next_non_blank_line()
            if body_line is None:
                break

            if body_line.indentation_columns <= line.indentation_columns:
                self._line_source.push_back(body_line)
                break

            body_segments.append(left_trim(body_line.content))

        self._render_context.write_braced_command(header.name, ARGUMENT_BODY_SEPARATOR.join(body_segments))

    def process_title_command(self, line: 'Line', header: 'HeaderParseResult'):
        """
        Process a title or sectioning command.

        As for braced commands, except that the title is the inline text,
        or else the single next non-blank line if it is deeper (or else empty).
        """
        if header.args_before != '':
            self._render_context.write_command(header.name, header.args_before)
            self.skip_deeper_lines(line)
            return

        title = header.inline_after

        if title == '':
            title_line = self.take_next_non_blank_line()
            if title_line is not None:
                if title_line.indentation_columns <= line.indentation_columns:
                    self._line_source.push_back(title_line)
                else:
                    title = left_trim(title_line.content)

        self._render_context.write_braced_command(header.name, title)

    def process_literal_line(self, line: 'Line'):
        content = line.content

        if content.startswith('\\'):
            self._render_context.write_line(content)
        elif looks_like_command_call(content):
            self._render_context.write_line('\\' + content)
        elif self.inside_list_environment():
            self._render_context.write_list_item(strip_list_marker(content))
        else:
            self._render_context.write_text_line(content)
