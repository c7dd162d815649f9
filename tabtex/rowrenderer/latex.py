from ._base import RowRenderer


class LatexRowRenderer(RowRenderer):
    r"""
    Produces rows in the syntax of a LaTeX ``tabular`` environment body::

        a & \( 1 \) & b  \\
    """

    column_separator = ' & '

    row_terminator = '  \\\\'
    r"""
    Appended to each row, i.e., two spaces followed by ``\\``.
    """

    def render_row(self, cells):
        return self.column_separator.join(cells) + self.row_terminator


# ------------------------------------------------------------------------------

class RowRendererInformation:
    RowRendererClass = LatexRowRenderer

    format_name = 'latex'
