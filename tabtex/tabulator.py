r"""
The core text-to-tabular transformation.

Each nonblank line of the input becomes one row of the table.  Within a line,
cells are separated by runs of (at least) two whitespace characters, so that
single spaces can appear inside a cell.  A cell consisting of the placeholder
``\empty`` alone is rendered as an empty cell, and numbers and backslash
escapes (``\alpha``, ``\%``, ...) are wrapped in inline math.

Example::

    >>> from tabtex import transform
    >>> print(transform("Name  Size\nfoo bar  12\n\\alpha  \\empty"))
    Name & Size  \\
    foo bar & \( 12 \)  \\
    \( \alpha \) &   \\
"""

import re

import logging
logger = logging.getLogger(__name__)

from .mathtokens import wrap_math_tokens, default_math_delimiters
from .rowrenderer.latex import LatexRowRenderer


_rx_double_space = re.compile(r'\s{2,}')

cell_delimiters = ('double-space', 'single-space')
r"""
Supported ways of splitting a line into cells:

- 'double-space': two or more consecutive whitespace characters separate
  cells, a single space is part of the cell content;

- 'single-space': every space separates cells, and empty cells produced by
  repeated spaces are dropped.  This is how early versions of the tool
  worked; cells cannot contain spaces in this mode.
"""

default_placeholder = '\\empty'


class Tabulator:
    r"""
    Transforms text into LaTeX tabular rows.

    Arguments:

    - `cell_delimiter` is one of the names in :py:data:`cell_delimiters`;

    - `placeholder` is the cell content that stands for an empty cell;

    - `wrap_math` specifies whether digit runs and backslash escapes get
      wrapped in `math_delimiters` (by default ``\( `` and `` \)``).

    Instances hold no state beyond these options; the same instance can be
    used for any number of inputs.
    """

    def __init__(self, *, cell_delimiter='double-space', placeholder=None,
                 wrap_math=True, math_delimiters=None):
        super().__init__()

        if cell_delimiter not in cell_delimiters:
            raise ValueError(
                f"Invalid cell delimiter ‘{cell_delimiter}’, expected one of "
                f"{', '.join(cell_delimiters)}"
            )

        self.cell_delimiter = cell_delimiter
        self.placeholder = placeholder if placeholder is not None else default_placeholder
        self.wrap_math = wrap_math
        self.math_delimiters = tuple(math_delimiters or default_math_delimiters)

        if len(self.math_delimiters) != 2:
            raise ValueError(
                f"math_delimiters must be a pair (open, close), got {math_delimiters!r}"
            )

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(cell_delimiter={self.cell_delimiter!r}, "
            f"placeholder={self.placeholder!r}, wrap_math={self.wrap_math!r})"
        )

    def split_cells(self, line):
        r"""
        Split a single input line into its list of trimmed cells.  Returns an
        empty list if the line does not produce a table row.
        """
        line = line.strip()
        if not line:
            return []

        if self.cell_delimiter == 'single-space':
            return [ c.strip() for c in line.split(' ') if c.strip() ]

        cells = _rx_double_space.split(line)
        if len(cells) == 1 and cells[0] == '':
            return []
        return [ c.strip() for c in cells ]

    def iter_rows(self, text):
        r"""
        Yield the list of (unrendered) cells of each row of `text`, skipping
        blank lines.
        """
        for line in text.split('\n'):
            cells = self.split_cells(line)
            if not cells:
                continue
            yield cells

    def render_cell(self, cell):
        if cell == self.placeholder:
            return ''
        if not self.wrap_math:
            return cell
        return wrap_math_tokens(cell, self.math_delimiters)

    def tabulate(self, text):
        r"""
        Return a list of rows, each row being the list of rendered cell
        contents (strings), for the given input `text`.
        """
        rows = [
            [ self.render_cell(cell) for cell in cells ]
            for cells in self.iter_rows(text)
        ]
        logger.debug("Tabulated %d row(s)", len(rows))
        return rows

    def transform(self, text, row_renderer=None):
        r"""
        Transform `text` into the body of a LaTeX tabular environment.  Rows are
        separated by newlines and each one ends with ``  \\``.

        A different `row_renderer` (a
        :py:class:`~tabtex.rowrenderer._base.RowRenderer` instance) can be
        specified to produce another output format.
        """
        if row_renderer is None:
            row_renderer = LatexRowRenderer()
        return row_renderer.render_rows(self.tabulate(text))


_default_tabulator = Tabulator()

def transform(text):
    r"""
    Shorthand for ``Tabulator().transform(text)`` with all default options.
    """
    return _default_tabulator.transform(text)
