import logging
logger = logging.getLogger(__name__)


class RowRenderer:
    r"""
    Base class for turning tabulated rows into the final output string.

    Rows are given as lists of rendered cell strings, as returned by
    :py:meth:`tabtex.tabulator.Tabulator.tabulate`.
    """

    row_separator = '\n'

    def __init__(self, config=None):
        super().__init__()
        # use config to set properties on the class object.
        if config is not None:
            for k,v in config.items():
                if not hasattr(self, k):
                    logger.warning("Ignoring unknown %s setting ‘%s’",
                                   self.__class__.__name__, k)
                    continue
                setattr(self, k, v)

    def render_rows(self, rows):
        return self.row_separator.join(
            self.render_row(cells)
            for cells in rows
        )

    def render_row(self, cells):
        raise RuntimeError("Must be reimplemented by subclasses!")
