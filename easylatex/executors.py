"""
# EasyLaTeX: executors.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Code execution for `python:` blocks.

The conversion logic only ever sees `CodeExecutor.execute(source) -> output`;
how (or whether) an interpreter process is spawned is a matter for the executor.
"""

import abc
import os
import subprocess
import tempfile
import warnings
from typing import Iterable

from easylatex.constants import (
    DEFAULT_INTERPRETER_NAMES,
    ENCODING,
    ENCODING_ERRORS,
    INTERPRETER_NOT_FOUND_DIAGNOSTIC,
    TEMPORARY_FILE_PREFIX,
)
from easylatex.exceptions import CodeExecutionException


class CodeExecutor(abc.ABC):
    """
    Base class for a code execution service.

    `execute(source)` returns the captured output text of running «source».
    Failure of the executed code is not an error: its diagnostics are part of the output.
    """
    @abc.abstractmethod
    def execute(self, source: str) -> str:
        raise NotImplementedError


class SubprocessCodeExecutor(CodeExecutor):
    """
    A code executor that runs source in an external interpreter process.

    The source is written to a uniquely named temporary file, which is deleted on every exit path.
    Interpreters are tried in order until one can be launched;
    combined standard output and standard error are captured.
    If no interpreter can be launched, a fixed diagnostic is returned in place of output.
    There is no timeout: execution blocks until the process exits.
    """
    _interpreter_names: tuple[str, ...]

    def __init__(self, interpreter_names: Iterable[str] = DEFAULT_INTERPRETER_NAMES):
        self._interpreter_names = tuple(interpreter_names)

    @property
    def interpreter_names(self) -> tuple[str, ...]:
        return self._interpreter_names

    @staticmethod
    def write_temporary_source(source: str) -> str:
        try:
            file_descriptor, source_file_name = tempfile.mkstemp(prefix=TEMPORARY_FILE_PREFIX, suffix='.py')
        except OSError as os_error:
            raise CodeExecutionException(f'error: cannot create temporary file: {os_error}') from os_error

        try:
            with os.fdopen(file_descriptor, 'w', encoding=ENCODING, errors=ENCODING_ERRORS) as source_file:
                source_file.write(source)
        except OSError as os_error:
            SubprocessCodeExecutor.remove_temporary_source(source_file_name)
            raise CodeExecutionException(f'error: cannot write temporary file `{source_file_name}`: {os_error}') \
                from os_error

        return source_file_name

    @staticmethod
    def remove_temporary_source(source_file_name: str):
        try:
            os.remove(source_file_name)
        except FileNotFoundError:
            pass

    def run_interpreters(self, source_file_name: str) -> str:
        for interpreter_name in self._interpreter_names:
            try:
                completed_process = subprocess.run(
                    [interpreter_name, source_file_name],
                    stdin=subprocess.DEVNULL,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.STDOUT,
                    encoding=ENCODING,
                    errors=ENCODING_ERRORS,
                )
            except (FileNotFoundError, PermissionError):
                continue

            return completed_process.stdout

        interpreter_list = ', '.join(f'`{interpreter_name}`' for interpreter_name in self._interpreter_names)
        warnings.warn(f'warning: no interpreter could be launched (tried {interpreter_list})')

        return INTERPRETER_NOT_FOUND_DIAGNOSTIC

    def execute(self, source: str) -> str:
        source_file_name = SubprocessCodeExecutor.write_temporary_source(source)

        try:
            return self.run_interpreters(source_file_name)
        finally:
            SubprocessCodeExecutor.remove_temporary_source(source_file_name)
