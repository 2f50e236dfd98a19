"""
# EasyLaTeX: test_core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `core.py`.
"""

import io
import re
import unittest

from easylatex.constants import DEFAULT_PREAMBLE, DOCUMENT_CLOSING
from easylatex.core import convert_stream, easylatex_to_latex
from easylatex.executors import CodeExecutor


class FixedOutputCodeExecutor(CodeExecutor):
    def __init__(self, output: str):
        self.output = output
        self.sources = []

    def execute(self, source: str) -> str:
        self.sources.append(source)
        return self.output


def document(body: str) -> str:
    return DEFAULT_PREAMBLE + body + DOCUMENT_CLOSING


def convert(easylatex: str, **kwargs) -> str:
    kwargs.setdefault('code_executor', FixedOutputCodeExecutor('out'))
    return easylatex_to_latex(easylatex, **kwargs)


class TestCore(unittest.TestCase):
    def test_empty_document(self):
        self.assertEqual(convert(''), '')
        self.assertEqual(convert('\n\n'), '\n\n')

    def test_plain_text(self):
        self.assertEqual(convert('Hello world\n'), document('Hello world\n'))
        self.assertEqual(convert('No final newline'), document('No final newline\n'))
        self.assertEqual(convert('One\\nTwo\\nThree\n'), document('One\\\\\nTwo\\\\\nThree\n'))
        self.assertEqual(convert('\nHello\n'), '\n' + document('Hello\n'))
        self.assertEqual(convert('Para one\n\nPara two   \r\n'), document('Para one\n\nPara two\n'))

    def test_literal_lines(self):
        self.assertEqual(convert('\\vspace{1em}\\n\n'), document('\\vspace{1em}\\n\n'))
        self.assertEqual(convert('  \\noindent Text\n'), document('\\noindent Text\n'))
        self.assertEqual(convert('vspace{1em}\n'), document('\\vspace{1em}\n'))
        self.assertEqual(convert('textbf{bold} and more\n'), document('\\textbf{bold} and more\n'))

    def test_unrecognised_header(self):
        self.assertEqual(convert('Note: this matters\\na lot\n'), document('Note: this matters\\\\\na lot\n'))
        self.assertEqual(convert('Section: capitalised\n'), document('Section: capitalised\n'))
        self.assertEqual(
            convert('itemize:\n  Note: not an item\n'),
            document('\\begin{itemize}\nNote: not an item\n\\end{itemize}\n'),
        )

    def test_braced_commands(self):
        self.assertEqual(
            convert('title: My Document\nauthor: Me\n'),
            document('\\title{My Document}\n\\author{Me}\n'),
        )
        self.assertEqual(
            convert('title:\n  My Document\nNext paragraph\n'),
            document('\\title{My Document}\nNext paragraph\n'),
        )
        self.assertEqual(
            convert('author:\n  Alice\n\n  Bob\\nCarol\nText\n'),
            document('\\author{Alice \\\\ Bob\\\\Carol}\nText\n'),
        )
        self.assertEqual(convert('caption: A\n    B\n'), document('\\caption{A \\\\ B}\n'))
        self.assertEqual(convert('date:\n'), document('\\date{}\n'))
        self.assertEqual(
            convert('href{https://example.org}{Example}:\n  discarded\n\nafter\n'),
            document('\\href{https://example.org}{Example}\nafter\n'),
        )

    def test_title_commands(self):
        self.assertEqual(convert('section: Introduction\n'), document('\\section{Introduction}\n'))
        self.assertEqual(
            convert('section:\n\n  Introduction\n  stray\nBody\n'),
            document('\\section{Introduction}\nstray\nBody\n'),
        )
        self.assertEqual(convert('section:\nBody\n'), document('\\section{}\nBody\n'))
        self.assertEqual(convert('subsection:'), document('\\subsection{}\n'))
        self.assertEqual(
            convert('section[Short]{A Long Title}:\n  discarded\nBody\n'),
            document('\\section[Short]{A Long Title}\nBody\n'),
        )
        self.assertEqual(convert('chapter: One\\nTwo\n'), document('\\chapter{One\\\\Two}\n'))

    def test_no_body_commands(self):
        self.assertEqual(
            convert('maketitle:\n\n\n    stray\nBody\n'),
            document('\\maketitle\nBody\n'),
        )
        self.assertEqual(
            convert('tableofcontents: ignored inline\nnewpage:\n'),
            document('\\tableofcontents\n\\newpage\n'),
        )

    def test_list_environments(self):
        self.assertEqual(
            convert('itemize:\n  - first\n  * second\\nline\n  third\nDone\n'),
            document(
                '\\begin{itemize}\n'
                '\\item first\n'
                '\\item second\\\\\nline\n'
                '\\item third\n'
                '\\end{itemize}\n'
                'Done\n'
            ),
        )

    def test_nested_environments(self):
        latex = convert(
            'enumerate:\n'
            '  - one\n'
            '  center:\n'
            '    Centered\n'
            '  - two\n'
        )
        self.assertEqual(
            latex,
            document(
                '\\begin{enumerate}\n'
                '\\item one\n'
                '\\begin{center}\n'
                'Centered\n'
                '\\end{center}\n'
                '\\item two\n'
                '\\end{enumerate}\n'
            ),
        )

    def test_environment_arguments_and_inline_text(self):
        self.assertEqual(
            convert(
                'figure[h]: intro text\n'
                '  includegraphics[width=5cm]{a.png}\n'
                '  caption: A figure\n'
            ),
            document(
                '\\begin{figure}[h]\n'
                'intro text\n'
                '\\includegraphics[width=5cm]{a.png}\n'
                '\\caption{A figure}\n'
                '\\end{figure}\n'
            ),
        )

    def test_stack_discipline(self):
        latex = convert(
            'quote:\n'
            '  center:\n'
            '    math:\n'
            '      x\n'
            '  itemize:\n'
            '    - a\n'
            '    description:\n'
            '      abstract:\n'
            'Text\n'
            'flushleft:\n'
            '  verse:\n'
        )
        begin_names = re.findall(r'\\begin\{([a-z]+)\}', latex)
        end_names = re.findall(r'\\end\{([a-z]+)\}', latex)
        self.assertEqual(sorted(begin_names), sorted(end_names))

        stack = []
        for match in re.finditer(r'\\(begin|end)\{([a-z]+)\}', latex):
            if match.group(1) == 'begin':
                stack.append(match.group(2))
            else:
                self.assertEqual(stack.pop(), match.group(2))
        self.assertEqual(stack, [])

    def test_closing_on_equal_indentation(self):
        self.assertEqual(
            convert(
                'quote:\n'
                '  center:\n'
                '    math:\n'
                '      x\n'
                'Text\n'
            ),
            document(
                '\\begin{quote}\n'
                '\\begin{center}\n'
                '\\[\n'
                '\\begin{aligned}\n'
                'x\n'
                '\\end{aligned}\n'
                '\\]\n'
                '\\end{center}\n'
                '\\end{quote}\n'
                'Text\n'
            ),
        )
        self.assertEqual(
            convert('  center:\n  Outside\n'),
            document('\\begin{center}\n\\end{center}\nOutside\n'),
        )

    def test_blank_lines_do_not_close(self):
        self.assertEqual(
            convert('center:\n  a\n\n  b\n'),
            document('\\begin{center}\na\n\nb\n\\end{center}\n'),
        )

    def test_math_rows(self):
        self.assertEqual(
            convert('math:\n  a = b\n  c = d\n\n  e = f\nText\n'),
            document(
                '\\[\n'
                '\\begin{aligned}\n'
                'a = b \\\\\n'
                'c = d \\\\[0.6em]\n'
                'e = f\n'
                '\\end{aligned}\n'
                '\\]\n'
                'Text\n'
            ),
        )
        self.assertEqual(
            convert('math:\n  x &= 1 \\n y &= 2\n      section: not a header\n'),
            document(
                '\\[\n'
                '\\begin{aligned}\n'
                'x &= 1  \\\\\n'
                ' y &= 2 \\\\\n'
                'section: not a header\n'
                '\\end{aligned}\n'
                '\\]\n'
            ),
        )
        self.assertEqual(convert('math:\n'), document('\\[\n\\begin{aligned}\n\\end{aligned}\n\\]\n'))

    def test_math_latex_line_is_consumed(self):
        self.assertEqual(
            convert('math:\n  latex:\n  x\n'),
            document('\\[\n\\begin{aligned}\nx\n\\end{aligned}\n\\]\n'),
        )

    def test_raw_blocks(self):
        self.assertEqual(
            convert(
                'latex:\n'
                '  \\begin{tabular}{ll}\n'
                '    a & b \\\\\n'
                '   section: not a header\n'
                '  \\end{tabular}\n'
                'Text\n'
            ),
            document(
                '\\begin{tabular}{ll}\n'
                '  a & b \\\\\n'
                ' section: not a header\n'
                '\\end{tabular}\n'
                'Text\n'
            ),
        )
        self.assertEqual(convert('latex:\nText\n'), document('Text\n'))

    def test_raw_passthrough_is_idempotent(self):
        previous_latex = convert(
            'title: A\n'
            'maketitle:\n'
            'section: One\n'
            'itemize:\n'
            '  - x\\ny\n'
            '\tcenter:\n'
            '\t\tdeep\n'
            'math:\n'
            '  a\\nb\n'
        )
        wrapped = 'latex:\n' + ''.join(
            f'  {line}\n' if line != '' else '\n'
            for line in previous_latex.splitlines()
        )
        self.assertEqual(convert(wrapped), document(previous_latex))

    def test_code_blocks(self):
        code_executor = FixedOutputCodeExecutor('out')
        self.assertEqual(
            convert('python:\n    for i in range(2):\n        print(i)\nAfter\n', code_executor=code_executor),
            document('\\begin{verbatim}\nout\n\\end{verbatim}\nAfter\n'),
        )
        self.assertEqual(code_executor.sources, ['for i in range(2):\n    print(i)\n'])

        self.assertEqual(
            convert('python[results=tex]:\n  print(1)\nAfter\n'),
            document('out\nAfter\n'),
        )
        self.assertEqual(
            convert('python [ RESULTS=Raw ]:\n  print(1)\n'),
            document('out\n'),
        )

    def test_code_block_closed_at_end_of_input(self):
        code_executor = FixedOutputCodeExecutor('Traceback (most recent call last):\nZeroDivisionError\n')
        self.assertEqual(
            convert('itemize:\n  python:\n    1 / 0', code_executor=code_executor),
            document(
                '\\begin{itemize}\n'
                '\\begin{verbatim}\n'
                'Traceback (most recent call last):\n'
                'ZeroDivisionError\n'
                '\\end{verbatim}\n'
                '\\end{itemize}\n'
            ),
        )
        self.assertEqual(code_executor.sources, ['1 / 0\n'])

    def test_tab_width(self):
        self.assertEqual(
            convert('itemize:\n  center:\n\t- a\n', tab_width=2),
            document('\\begin{itemize}\n\\begin{center}\n\\end{center}\n\\item a\n\\end{itemize}\n'),
        )
        self.assertEqual(
            convert('itemize:\n  center:\n\t- a\n'),
            document('\\begin{itemize}\n\\begin{center}\n- a\n\\end{center}\n\\end{itemize}\n'),
        )

    def test_convert_stream(self):
        output = io.StringIO()
        trace_stream = io.StringIO()
        convert_stream(
            io.StringIO('center:\n  x\n'),
            output,
            code_executor=FixedOutputCodeExecutor(''),
            verbose_mode_enabled=True,
            preamble='',
            trace_stream=trace_stream,
        )
        self.assertEqual(output.getvalue(), '\\begin{center}\nx\n\\end{center}\n' + DOCUMENT_CLOSING)
        self.assertEqual(
            trace_stream.getvalue(),
            'verbose: line 1: directive `center`\n'
            'verbose: line 1: open environment `center` block at indentation 0\n'
            'verbose: line 2: close environment `center` block\n',
        )


if __name__ == '__main__':
    unittest.main()
