import sys
import argparse
import logging

import colorlog

from .main.main import main as _main
from .main.watch import main_watch as _main_watch
from .tabulator import cell_delimiters
from tabtex import __version__ as tabtex_version


def setup_logging(level):
    # You should use colorlog >= 6.0.0a4
    handler = colorlog.StreamHandler()
    handler.setFormatter( colorlog.LevelFormatter(
        log_colors={
            "DEBUG": "white",
            "INFO": "",
            "WARNING": "red",
            "ERROR": "bold_red",
            "CRITICAL": "bold_red",
        },
        fmt={
            "DEBUG":    "%(log_color)s〰️    %(message)s",
            "INFO":     "%(log_color)s✨  %(message)s",
            "WARNING":  "%(log_color)s⚠️   %(message)s",
            "ERROR":    "%(log_color)s🚨  %(message)s",
            "CRITICAL": "%(log_color)s🚨  %(message)s",
        },
        stream=sys.stderr
    ) )

    root = colorlog.getLogger()
    # replace the handler installed by an earlier call, if any
    for h in list(root.handlers):
        if getattr(h, "_tabtex_handler", False):
            root.removeHandler(h)
    handler._tabtex_handler = True
    root.addHandler(handler)

    root.setLevel(level)



def run_main(cmdargs=None, enable_debug_pdb=False, exit_code_on_error=1):
    try:
        _run_main_inner(cmdargs)
    except Exception as e:
        logging.getLogger('tabtex').debug("Got exception, traceback = ", exc_info=True)
        logging.getLogger('tabtex').critical(f"Error: {e}")
        if enable_debug_pdb:
            import pdb
            pdb.post_mortem()
        elif exit_code_on_error is not None:
            sys.exit(exit_code_on_error)


def _run_main_inner(cmdargs=None):
    
    args_parser = argparse.ArgumentParser(
        prog='tabtex',
        description='Turn space-separated columns of text into LaTeX tabular rows.',
        epilog='Separate cells with two spaces, rows with newlines, and write '
        '\\empty for an empty cell.',
    )

    args_parser.add_argument('-c', '--content', action='store',
                             help="Text content to convert")

    args_parser.add_argument('-C', '--config', action='store',
                             default=None,
                             help="YAML Configuration file.  By default, "
                             "‘tabtexconfig.yaml’ will be used in the current directory "
                             "if it exists.  In all cases the input YAML front matter "
                             "takes precedence over this config.")

    args_parser.add_argument('-d', '--cell-delimiter', action='store',
                             default=None,
                             choices=cell_delimiters,
                             help="How cells are separated on each line: by two or more "
                             "whitespace characters (‘double-space’, the default), or by "
                             "single spaces (‘single-space’)")

    args_parser.add_argument('--no-math', action='store_false',
                             dest='wrap_math', default=None,
                             help="Do not wrap numbers and backslash escapes in \\( ... \\)")

    args_parser.add_argument('-f', '--format', action='store',
                             default=None,
                             help="Output format.  One of latex,text or a "
                             "fully specified module or class name defining a "
                             "RowRenderer subclass.")

    args_parser.add_argument('-o', '--output', action='store',
                             default=None,
                             help="Output file name (stdout by default or with ‘--output=-’)")

    args_parser.add_argument('-x', '--copy', action='store_true',
                             default=False,
                             help="Also copy the output to the clipboard")

    args_parser.add_argument('-W', '--watch', action='store_true',
                             default=False,
                             help="Continuously monitor the input file and update the output "
                             "as the input file is modified.")

    args_parser.add_argument('-n', '--suppress-final-newline', action='store_true',
                             default=False,
                             help="Do not add a newline at the end of the output")

    args_parser.add_argument('-v', '--verbose', action='store_true',
                             default=False,
                             help="Enable verbose debugging output")

    args_parser.add_argument('--version', action='version', version=tabtex_version)

    args_parser.add_argument('files', metavar="FILE", nargs='*',
                             help='Input files (if none specified, read from standard input)')

    # --

    args = args_parser.parse_args(args=cmdargs)


    #
    # set up logging
    #
    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    setup_logging(level=level)
    logging.getLogger('pylatexenc').setLevel(level=logging.INFO)

    d = dict(args.__dict__)
    d.pop('verbose')
    watch = d.pop('watch')

    #
    # If in watch mode, set that up 
    #

    if watch:

        _main_watch(**d)

        return

    #
    # Dispatch call to our main function
    #

    _main(**d)

    return



if __name__ == '__main__':
    run_main()
