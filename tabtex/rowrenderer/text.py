import logging
logger = logging.getLogger(__name__)

from pylatexenc.latex2text import LatexNodes2Text

from ._base import RowRenderer


class TextRowRenderer(RowRenderer):
    r"""
    Plain-text preview of the table: the LaTeX code of each cell is converted to
    text (``\( \alpha \)`` shows as ``α``) and cells are separated by a vertical
    bar.
    """

    column_separator = ' | '

    math_mode = 'text'
    r"""
    How math content is shown, see the `math_mode` argument of pylatexenc's
    `LatexNodes2Text`.
    """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.latex_to_text_converter = LatexNodes2Text(math_mode=self.math_mode)

    def render_cell(self, cell):
        if not cell:
            return ''
        return self.latex_to_text_converter.latex_to_text(cell).strip()

    def render_row(self, cells):
        return self.column_separator.join(
            self.render_cell(cell) for cell in cells
        )


# ------------------------------------------------------------------------------

class RowRendererInformation:
    RowRendererClass = TextRowRenderer

    format_name = 'text'
