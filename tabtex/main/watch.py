import logging
logger = logging.getLogger(__name__)

import watchfiles

logging.getLogger("watchfiles").setLevel(logging.WARNING)

from . import main


def main_watch(**kwargs):
    r"""
    Run tabtex on the given input files, and run it again each time one of the
    input files is modified, until interrupted with Ctrl+C.
    """

    watch_files = [ f for f in (kwargs.get('files', None) or []) if f != '-' ]

    if kwargs.get('content', None) is not None or not watch_files:
        raise ValueError(
            "Watch mode requires input file(s) to monitor (no --content or standard input)"
        )

    def do_run():
        main_runner = main.Main(**kwargs)
        main_runner.run()

    do_run()

    logger.info('Watching input files, hit Interrupt (Ctrl+C) to quit.')

    for changes in watchfiles.watch(*watch_files, raise_interrupt=False, debounce=500):
        logger.info('Input file(s) changed: %s', ",".join([
            fname for (_, fname) in changes
        ]))
        try:
            do_run()
        except Exception as e:
            logger.error("Error processing the input! %s", e, exc_info=e)

    logger.info('Okay, quitting now.')
