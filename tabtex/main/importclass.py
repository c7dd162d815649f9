import logging
logger = logging.getLogger(__name__)

import importlib

from ..rowrenderer._base import RowRenderer


def _try_import(modname):
    try:
        return importlib.import_module(modname)
    except ModuleNotFoundError as e:
        # only skip if it's the module (or one of its parent packages) that
        # is missing, not one of its own imports
        if e.name != modname and not modname.startswith(f"{e.name}."):
            raise
        logger.debug(f"Could not find module ‘{modname}’: {str(e)}")
        return None


def get_row_renderer_class(format_name):
    r"""
    Return the :py:class:`~tabtex.rowrenderer._base.RowRenderer` subclass for
    the output format `format_name`.

    A plain name such as 'latex' or 'text' refers to a module of
    :py:mod:`tabtex.rowrenderer` (or to a top-level module of that name)
    defining `RowRendererInformation`.  A dotted name is either such a module,
    or a ``module.ClassName`` pointing directly to a renderer class.
    """

    candidates = []
    if '.' not in format_name:
        candidates.append( (f"tabtex.rowrenderer.{format_name}", None) )
        candidates.append( (format_name, None) )
    else:
        modname, classname = format_name.rsplit('.', maxsplit=1)
        candidates.append( (format_name, None) )
        candidates.append( (modname, classname) )

    for modname, classname in candidates:
        mod = _try_import(modname)
        if mod is None:
            continue

        if classname is not None:
            RowRendererClass = getattr(mod, classname, None)
        else:
            info = getattr(mod, 'RowRendererInformation', None)
            RowRendererClass = getattr(info, 'RowRendererClass', None)

        if isinstance(RowRendererClass, type) and issubclass(RowRendererClass, RowRenderer):
            logger.debug(f"Using row renderer ‘{RowRendererClass.__name__}’ "
                         f"from module ‘{modname}’")
            return RowRendererClass

        logger.debug(f"No row renderer found in module ‘{modname}’")

    raise ValueError(f"Unknown output format ‘{format_name}’")
