"""
# EasyLaTeX: headers.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Directive header parsing.

A directive header is a line (with indentation already stripped) of the form
````
«identifier» «argument_group»* : «inline_text»
````
where «identifier» is a letter or underscore followed by letters, digits, or underscores,
and each «argument_group» is a bracketed `[...]` or braced `{...}` group balanced within the line.
"""

import re
from typing import NamedTuple, Optional

from easylatex.utilities import strip_line_ending

GROUP_CLOSING_FROM_OPENING = {
    '[': ']',
    '{': '}',
}


class HeaderParseResult(NamedTuple):
    name: str
    args_before: str
    inline_after: str


def compute_identifier_match(content: str) -> Optional[re.Match]:
    return re.match(
        pattern=r'[ \t]* (?P<identifier> [A-Za-z_] [A-Za-z0-9_]* )',
        string=content,
        flags=re.ASCII | re.VERBOSE,
    )


def skip_horizontal_whitespace(string: str, index: int) -> int:
    while index < len(string) and string[index] in ' \t':
        index += 1

    return index


def skip_balanced_group(string: str, index: int) -> Optional[int]:
    """
    Skip a balanced group opening at «index», returning the index just past its closing delimiter.

    Only delimiters of the group's own kind are counted,
    so that `[{]` is a complete bracketed group.
    Returns None if the group does not close before the end of the string.
    """
    opening = string[index]
    closing = GROUP_CLOSING_FROM_OPENING[opening]
    depth = 1
    index += 1

    while index < len(string) and depth > 0:
        character = string[index]
        if character == opening:
            depth += 1
        elif character == closing:
            depth -= 1
        index += 1

    if depth != 0:
        return None

    return index


def parse_header(content: str) -> Optional['HeaderParseResult']:
    """
    Attempt to parse a directive header.

    Returns None if «content» is not a directive header,
    i.e. if it has no leading identifier, an unbalanced argument group, or no terminating colon.
    The name is not checked against any vocabulary here.
    """
    content = strip_line_ending(content)

    identifier_match = compute_identifier_match(content)
    if identifier_match is None:
        return None

    name = identifier_match.group('identifier')
    args_start = identifier_match.end()

    index = skip_horizontal_whitespace(content, args_start)
    while index < len(content) and content[index] in GROUP_CLOSING_FROM_OPENING:
        index = skip_balanced_group(content, index)
        if index is None:
            return None
        index = skip_horizontal_whitespace(content, index)

    if index >= len(content) or content[index] != ':':
        return None

    args_before = content[args_start:index].strip(' \t')
    inline_after = content[index + 1:].lstrip(' \t')

    return HeaderParseResult(name, args_before, inline_after)
