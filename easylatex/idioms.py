"""
# EasyLaTeX: idioms.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common idioms: the recognised directive vocabularies and inline text rules.
"""

import re

from easylatex.constants import FORCED_LINE_BREAK, LINE_BREAK_ESCAPE

RAW_BLOCK_KEYWORD = 'latex'
MATH_BLOCK_KEYWORD = 'math'
CODE_BLOCK_KEYWORD = 'python'
BLOCK_KEYWORDS = [
    RAW_BLOCK_KEYWORD,
    MATH_BLOCK_KEYWORD,
    CODE_BLOCK_KEYWORD,
]
TITLE_COMMAND_NAMES = [
    'part',
    'chapter',
    'section',
    'subsection',
    'subsubsection',
    'paragraph',
    'subparagraph',
    'frametitle',
    'framesubtitle',
]
BRACED_COMMAND_NAMES = [
    'title',
    'subtitle',
    'author',
    'institute',
    'date',
    'caption',
    'label',
    'ref',
    'pageref',
    'nameref',
    'eqref',
    'url',
    'href',
    'emph',
    'textbf',
    'textit',
    'texttt',
    'textsc',
    'underline',
    'textrm',
    'textsf',
    'textmd',
    'textup',
    'textsl',
    'textnormal',
    'textsuperscript',
    'textsubscript',
    'input',
    'include',
    'includegraphics',
]
NO_BODY_COMMAND_NAMES = [
    'tableofcontents',
    'listoffigures',
    'listoftables',
    'maketitle',
    'newpage',
    'clearpage',
    'cleardoublepage',
    'smallskip',
    'medskip',
    'bigskip',
    'linebreak',
    'pagebreak',
    'nolinebreak',
    'nopagebreak',
    'pause',
    'centering',
    'raggedright',
    'raggedleft',
]
LIST_ENVIRONMENT_NAMES = [
    'itemize',
    'enumerate',
    'description',
]
ENVIRONMENT_NAMES = [
    'center',
    'flushleft',
    'flushright',
    'quote',
    'quotation',
    'verse',
    'abstract',
    'titlepage',
    *LIST_ENVIRONMENT_NAMES,
    'figure',
    'table',
    'tabular',
    'tabularx',
    'longtable',
    'equation',
    'align',
    'gather',
    'multline',
    'flalign',
    'split',
    'cases',
    'theorem',
    'lemma',
    'proposition',
    'corollary',
    'claim',
    'definition',
    'example',
    'remark',
    'proof',
    'thebibliography',
    'minipage',
    'verbatim',
    'lstlisting',
]
DIRECT_RESULTS_OPTIONS = [
    'results=tex',
    'results=asis',
    'results=raw',
]


def is_title_command(name: str) -> bool:
    return name in TITLE_COMMAND_NAMES


def is_braced_command(name: str) -> bool:
    return name in BRACED_COMMAND_NAMES


def is_no_body_command(name: str) -> bool:
    return name in NO_BODY_COMMAND_NAMES


def is_known_environment(name: str) -> bool:
    return name in ENVIRONMENT_NAMES


def is_list_environment(name: str) -> bool:
    return name in LIST_ENVIRONMENT_NAMES


def is_recognised_header_name(name: str) -> bool:
    return (
        name in BLOCK_KEYWORDS
        or is_title_command(name)
        or is_braced_command(name)
        or is_no_body_command(name)
        or is_known_environment(name)
    )


def looks_like_command_call(content: str) -> bool:
    """
    Whether content is an implicit command invocation, i.e. an identifier immediately followed by `{` or `[`.
    """
    return bool(re.match(pattern=r'[A-Za-z_] [A-Za-z0-9_]* [{\[]', string=content, flags=re.ASCII | re.VERBOSE))


def strip_list_marker(content: str) -> str:
    """
    Strip one leading list marker (`- ` or `* `), if any.
    """
    return re.sub(pattern=r'\A [ \t]* (?: [-*][ ] )?', repl='', string=content, count=1, flags=re.VERBOSE)


def escape_line_breaks(text: str) -> str:
    """
    Rewrite each `\\n` escape as a forced line break followed by a newline, for a line of text.
    """
    return text.replace(LINE_BREAK_ESCAPE, FORCED_LINE_BREAK + '\n')


def escape_argument_line_breaks(text: str) -> str:
    """
    Rewrite each `\\n` escape as a forced line break, for a command argument body.
    """
    return text.replace(LINE_BREAK_ESCAPE, FORCED_LINE_BREAK)


def split_math_rows(text: str) -> list[str]:
    """
    Split a line of math on `\\n` escapes into rows.

    A trailing escape ends the last row rather than opening an empty one.
    """
    rows = text.split(LINE_BREAK_ESCAPE)
    if rows[-1] == '':
        rows.pop()

    return rows


def compute_results_mode_is_direct(args_before: str) -> bool:
    """
    Whether a code block's output is to be emitted unwrapped.

    The first bracketed option group of the header is searched, case-insensitively,
    for `results=tex`, `results=asis`, or `results=raw`.
    Absent such an option, output is wrapped in a verbatim environment.
    """
    options_match = re.search(pattern=r'\[ (?P<options> [^\]]* ) \]', string=args_before, flags=re.VERBOSE)
    if options_match is None:
        return False

    options = options_match.group('options').lower()

    return any(option in options for option in DIRECT_RESULTS_OPTIONS)
