"""
# EasyLaTeX: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2

ENCODING = 'utf-8'
ENCODING_ERRORS = 'surrogateescape'

DEFAULT_TAB_WIDTH = 4
DEFAULT_INTERPRETER_NAMES = ('python3', 'python')
TEMPORARY_FILE_PREFIX = 'easylatex_py_'
INTERPRETER_NOT_FOUND_DIAGNOSTIC = 'ERROR: could not run python (python3/python not found)\n'

DEFAULT_PREAMBLE = r'''\documentclass{article}
\usepackage[T1]{fontenc}
\usepackage[utf8]{inputenc}
\usepackage{amsmath}
\usepackage{amssymb}
\usepackage{amsthm}
\usepackage{graphicx}
\usepackage{hyperref}
\usepackage{booktabs}
\usepackage{tabularx}
\usepackage{longtable}
\usepackage{xcolor}
\usepackage{listings}
\theoremstyle{plain}
\newtheorem{theorem}{Theorem}[section]
\newtheorem{lemma}[theorem]{Lemma}
\newtheorem{proposition}[theorem]{Proposition}
\newtheorem{corollary}[theorem]{Corollary}
\newtheorem{claim}[theorem]{Claim}
\theoremstyle{definition}
\newtheorem{definition}[theorem]{Definition}
\newtheorem{example}[theorem]{Example}
\theoremstyle{remark}
\newtheorem{remark}[theorem]{Remark}
\begin{document}
'''
DOCUMENT_CLOSING = '\\end{document}\n'

MATH_OPENING = '\\[\n\\begin{aligned}\n'
MATH_CLOSING = '\\end{aligned}\n\\]\n'
MATH_ROW_SEPARATOR = ' \\\\\n'
MATH_SPACED_ROW_SEPARATOR = ' \\\\[0.6em]\n'

VERBATIM_OPENING = '\\begin{verbatim}\n'
VERBATIM_CLOSING = '\\end{verbatim}\n'

LINE_BREAK_ESCAPE = '\\n'
FORCED_LINE_BREAK = '\\\\'
ARGUMENT_BODY_SEPARATOR = ' \\\\ '
