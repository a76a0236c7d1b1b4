#!/usr/bin/env python
# coding: utf-8

"""Copy formatted job logs to the system clipboard."""

import logging
import threading

import pyperclip

_logger = logging.getLogger(__package__)

SUCCESS_TITLE = "Copy Successful!"
SUCCESS_DESCRIPTION = ("The formatted job log has been successfully "
                       "copied to your clipboard.")
FAILURE_TITLE = "Copy Failed!"
FAILURE_DESCRIPTION = "Something went wrong. Please try copying again."


def success_message():
    return "{0} {1}".format(SUCCESS_TITLE, SUCCESS_DESCRIPTION)


def failure_message():
    return "{0} {1}".format(FAILURE_TITLE, FAILURE_DESCRIPTION)


def _copy(text, on_success, on_failure):
    try:
        pyperclip.copy(text)
    except Exception as e:
        # thread boundary: every error is reported as the failure outcome
        _logger.warning("clipboard copy failed: {0!r}".format(e))
        if on_failure is not None:
            on_failure(e)
    else:
        _logger.debug("{0} chars written to clipboard".format(len(text)))
        if on_success is not None:
            on_success(text)


def copy_to_clipboard(text, on_success=None, on_failure=None):
    """Start copying text to the clipboard in background.

    The outcome is reported once, through exactly one of the callbacks.
    There is no retry and no cancellation.

    Args:
        text (str): Formatted job log. Nothing is copied if empty.
        on_success (Optional[callable]): Called with the copied text.
        on_failure (Optional[callable]): Called with the exception
            raised by the copy, e.g. pyperclip.PyperclipException.

    Returns:
        threading.Thread or None: The started worker,
        None if there was nothing to copy.
    """
    if not text:
        return None
    th = threading.Thread(target=_copy, args=(text, on_success, on_failure),
                          name="clipboard-copy", daemon=True)
    th.start()
    return th
