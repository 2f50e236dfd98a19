"""
# EasyLaTeX: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import io
import os
import sys
from typing import Optional, TextIO

from easylatex._version import __version__
from easylatex.constants import (
    COMMAND_LINE_ERROR_EXIT_CODE,
    DEFAULT_INTERPRETER_NAMES,
    DEFAULT_TAB_WIDTH,
    ENCODING,
    ENCODING_ERRORS,
    GENERIC_ERROR_EXIT_CODE,
)
from easylatex.core import convert_stream
from easylatex.exceptions import CodeExecutionException
from easylatex.executors import SubprocessCodeExecutor

DESCRIPTION = '''
    Convert EasyLaTeX to LaTeX.
'''
FILE_NAME_HELP = '''
    name of EasyLaTeX file to be converted
    (standard input is read if omitted)
'''
OUTPUT_HELP = '''
    name of LaTeX file to be written
    (standard output is written if omitted)
'''
TAB_WIDTH_HELP = f'''
    number of columns a tab counts for in indentation (default {DEFAULT_TAB_WIDTH})
'''
PYTHON_HELP = f'''
    interpreter to run `python:` blocks with; may be given more than once,
    in which case each is tried in order until one can be launched
    (default {' then '.join(DEFAULT_INTERPRETER_NAMES)})
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints every block opened and closed to standard error)
'''


def parse_tab_width(argument: str) -> int:
    try:
        tab_width = int(argument)
    except ValueError:
        raise argparse.ArgumentTypeError(f'invalid tab width `{argument}`')

    if tab_width < 1:
        raise argparse.ArgumentTypeError(f'tab width must be positive, not `{argument}`')

    return tab_width


def parse_command_line_arguments(arguments: Optional[list[str]] = None) -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-o', '--output',
        dest='output_file_name',
        default=None,
        help=OUTPUT_HELP,
        metavar='file.tex',
    )
    argument_parser.add_argument(
        '-t', '--tab-width',
        dest='tab_width',
        default=DEFAULT_TAB_WIDTH,
        help=TAB_WIDTH_HELP,
        type=parse_tab_width,
    )
    argument_parser.add_argument(
        '-p', '--python',
        dest='interpreter_names',
        action='append',
        default=None,
        help=PYTHON_HELP,
        metavar='INTERPRETER',
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        'input_file_name',
        default=None,
        help=FILE_NAME_HELP,
        metavar='file',
        nargs='?',
    )

    return argument_parser.parse_args(arguments)


def wrap_standard_stream(standard_stream: TextIO) -> TextIO:
    """
    Wrap a standard stream so that arbitrary bytes pass through unchanged.
    """
    buffer = getattr(standard_stream, 'buffer', None)
    if buffer is None:
        return standard_stream

    return io.TextIOWrapper(buffer, encoding=ENCODING, errors=ENCODING_ERRORS, newline='\n')


def release_stream(stream: TextIO, standard_stream: TextIO, is_standard: bool):
    if not is_standard:
        stream.close()
    elif stream is not standard_stream:
        stream.flush()
        stream.detach()


def is_same_file(input_file_name: Optional[str], output_file_name: Optional[str]) -> bool:
    if input_file_name is None or output_file_name is None:
        return False

    return os.path.realpath(input_file_name) == os.path.realpath(output_file_name)


def open_input(input_file_name: Optional[str]) -> TextIO:
    if input_file_name is None:
        return wrap_standard_stream(sys.stdin)

    try:
        return open(input_file_name, 'r', encoding=ENCODING, errors=ENCODING_ERRORS, newline='\n')
    except OSError:
        print(f'error: cannot open `{input_file_name}`', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


def open_output(output_file_name: Optional[str]) -> TextIO:
    if output_file_name is None:
        return wrap_standard_stream(sys.stdout)

    try:
        return open(output_file_name, 'w', encoding=ENCODING, errors=ENCODING_ERRORS, newline='\n')
    except OSError:
        print(f'error: cannot write to `{output_file_name}`', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


def main(arguments: Optional[list[str]] = None):
    parsed_arguments = parse_command_line_arguments(arguments)
    input_file_name = parsed_arguments.input_file_name
    output_file_name = parsed_arguments.output_file_name
    interpreter_names = parsed_arguments.interpreter_names
    if interpreter_names is None:
        interpreter_names = DEFAULT_INTERPRETER_NAMES

    if is_same_file(input_file_name, output_file_name):
        print(f'error: output file `{output_file_name}` is the same as input file', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

    input_stream = open_input(input_file_name)
    output_stream = open_output(output_file_name)
    code_executor = SubprocessCodeExecutor(interpreter_names)

    try:
        convert_stream(
            input_stream,
            output_stream,
            tab_width=parsed_arguments.tab_width,
            code_executor=code_executor,
            verbose_mode_enabled=parsed_arguments.verbose_mode_enabled,
        )
    except CodeExecutionException as code_execution_exception:
        print(code_execution_exception, file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)
    except MemoryError:
        print('error: out of memory', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)
    except OSError as os_error:
        print(f'error: {os_error}', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)
    finally:
        release_stream(input_stream, sys.stdin, is_standard=input_file_name is None)
        release_stream(output_stream, sys.stdout, is_standard=output_file_name is None)


if __name__ == '__main__':
    main()
