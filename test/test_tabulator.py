import unittest

from tabtex import transform, Tabulator
from tabtex.rowrenderer.latex import LatexRowRenderer


class TestTransform(unittest.TestCase):

    maxDiff = None

    def test_placeholder_and_digits(self):
        self.assertEqual(
            transform(r"a  1  \empty"),
            r"a & \( 1 \) &   \\"
        )

    def test_simple(self):
        self.assertEqual(transform("x  y"), r"x & y  \\")

    def test_empty(self):
        self.assertEqual(transform(""), "")
        self.assertEqual(transform("   \n\t\n  "), "")

    def test_two_lines(self):
        self.assertEqual(
            transform("a  b\nc  d"),
            "a & b  \\\\\nc & d  \\\\"
        )

    def test_macro_and_digit(self):
        self.assertEqual(
            transform(r"\alpha  2"),
            r"\( \alpha \) & \( 2 \)  \\"
        )

    def test_single_space_is_content(self):
        self.assertEqual(
            transform("first name  last name"),
            r"first name & last name  \\"
        )

    def test_long_whitespace_runs_are_one_delimiter(self):
        self.assertEqual(transform("a     b\t\tc \td"), r"a & b & c & d  \\")

    def test_single_tab_is_content(self):
        self.assertEqual(transform("a\tb"), "a\tb  \\\\")

    def test_no_delimiter_gives_single_cell(self):
        self.assertEqual(transform("just one cell"), r"just one cell  \\")

    def test_blank_lines_skipped(self):
        self.assertEqual(
            transform("\n  a  b  \n\n   \nc  d\n"),
            "a & b  \\\\\nc & d  \\\\"
        )

    def test_crlf_line_endings(self):
        self.assertEqual(
            transform("a  b\r\nc  d\r\n"),
            "a & b  \\\\\nc & d  \\\\"
        )

    def test_placeholder_must_stand_alone(self):
        self.assertEqual(
            transform(r"\empty  x \empty  \Empty"),
            r" & x \( \empty \) & \( \Empty \)  \\"
        )

    def test_placeholder_everywhere(self):
        self.assertEqual(
            transform("\\empty  \\empty\n\\empty"),
            " &   \\\\\n  \\\\"
        )

    def test_special_chars(self):
        self.assertEqual(
            transform(r"50\%  \#1  \_x"),
            r"\( 50 \)\( \% \) & \( \# \)\( 1 \) & \( \_ \)x  \\"
        )

    def test_malformed_latex_passes_through(self):
        self.assertEqual(
            transform(r"\(  {  \\"),
            r"\( & { & \\  \\"
        )

    def test_number_of_cells_per_row(self):
        rows = Tabulator().tabulate("a  b  c\n\\empty  \\empty\nx")
        self.assertEqual([len(r) for r in rows], [3, 2, 1])

    def test_number_of_output_lines(self):
        text = "a\n\n b  c \n\t\nd  \\empty\n  e"
        nonblank = [ l for l in text.split('\n') if l.strip() ]
        self.assertEqual(len(transform(text).split('\n')), len(nonblank))


class TestTabulator(unittest.TestCase):

    maxDiff = None

    def test_split_cells(self):
        t = Tabulator()
        self.assertEqual(t.split_cells("  a b   c  "), ["a b", "c"])
        self.assertEqual(t.split_cells("   "), [])
        self.assertEqual(t.split_cells(""), [])

    def test_single_space_delimiter(self):
        t = Tabulator(cell_delimiter='single-space')
        self.assertEqual(
            t.transform("a b  \\empty 1\n\n  c  "),
            "a & b &  & \\( 1 \\)  \\\\\nc  \\\\"
        )

    def test_no_math(self):
        t = Tabulator(wrap_math=False)
        self.assertEqual(
            t.transform(r"\alpha  2  \empty"),
            r"\alpha & 2 &   \\"
        )

    def test_custom_placeholder(self):
        t = Tabulator(placeholder='-')
        self.assertEqual(
            t.transform(r"-  \empty  --"),
            r" & \( \empty \) & --  \\"
        )

    def test_custom_math_delimiters(self):
        t = Tabulator(math_delimiters=['$', '$'])
        self.assertEqual(t.transform("x  12"), r"x & $12$  \\")

    def test_invalid_cell_delimiter(self):
        with self.assertRaises(ValueError):
            Tabulator(cell_delimiter='comma')

    def test_invalid_math_delimiters(self):
        with self.assertRaises(ValueError):
            Tabulator(math_delimiters=['$'])

    def test_custom_row_renderer(self):
        renderer = LatexRowRenderer(config={'column_separator': '&',
                                            'row_terminator': r'\\'})
        self.assertEqual(
            Tabulator().transform("a  b\nc  d", row_renderer=renderer),
            "a&b\\\\\nc&d\\\\"
        )

    def test_tabulate(self):
        self.assertEqual(
            Tabulator().tabulate("x  1\n\n\\empty  y z"),
            [ ['x', r'\( 1 \)'], ['', 'y z'] ]
        )



if __name__ == '__main__':
    unittest.main()
