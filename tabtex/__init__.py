r"""
Turn whitespace-separated columns of text into the rows of a LaTeX
``tabular`` environment.
"""

__version__ = '0.1.0'

from .tabulator import Tabulator, transform
