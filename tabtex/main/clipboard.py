r"""
Copy text to the system clipboard using the platform's command-line tools.
"""

import os
import sys
import shutil
import subprocess

from dataclasses import dataclass

import logging
logger = logging.getLogger(__name__)


class ClipboardError(Exception):
    pass


@dataclass(frozen=True)
class ClipboardStatus:
    success: bool
    message: str


def get_clipboard_command():
    r"""
    Return the command (list of arguments) that reads text on its standard
    input and places it on the clipboard.  Raises :py:exc:`ClipboardError` if
    no suitable tool is available.
    """
    if sys.platform == "darwin":
        return ["pbcopy"]
    if os.name == "nt":
        return ["powershell", "-NoProfile", "-Command",
                "Set-Clipboard -Value ([Console]::In.ReadToEnd())"]
    if os.environ.get("WAYLAND_DISPLAY") and shutil.which("wl-copy"):
        return ["wl-copy"]
    if shutil.which("xclip"):
        return ["xclip", "-selection", "clipboard"]
    if shutil.which("xsel"):
        return ["xsel", "--clipboard", "--input"]
    raise ClipboardError(
        "No clipboard tool found (install wl-clipboard, xclip or xsel)"
    )


def set_clipboard(text):
    cmd = get_clipboard_command()
    logger.debug("Running clipboard command %r", cmd)
    try:
        p = subprocess.run(
            cmd,
            input=text.encode("utf-8"),
            stdout=subprocess.PIPE, stderr=subprocess.PIPE, check=False,
        )
    except OSError as e:
        raise ClipboardError(f"Could not run ‘{cmd[0]}’: {e}") from e
    if p.returncode != 0:
        raise ClipboardError(
            f"‘{cmd[0]}’ failed with exit code {p.returncode}: "
            + p.stderr.decode("utf-8", errors="replace").strip()
        )


def copy_to_clipboard(text):
    r"""
    Copy `text` to the clipboard and return a :py:class:`ClipboardStatus`
    describing the outcome.  Never raises on clipboard failures.
    """
    try:
        set_clipboard(text)
    except ClipboardError as e:
        logger.debug("Clipboard copy failed", exc_info=True)
        return ClipboardStatus(False, f"Failed to copy to clipboard: {e}")
    return ClipboardStatus(True, "Copied to clipboard!")
