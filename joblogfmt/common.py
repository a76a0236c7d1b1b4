#!/usr/bin/env python
# coding: utf-8

import os
import sys
import logging

_logger = logging.getLogger(__package__)


# file managing

def rep_dir(args):
    """Expand directories in args into their direct children."""
    if isinstance(args, str):
        args = [args]
    ret = []
    for arg in args:
        if os.path.isdir(arg):
            ret.extend(["/".join((arg, fn))
                        for fn in sorted(os.listdir(arg))])
        else:
            ret.append(arg)
    return ret


def _open_file(fp, **kwargs):
    ext = os.path.splitext(fp)[-1].lstrip(".")
    if ext == "bz2":
        import bz2
        open_func = bz2.open
    elif ext == "gz":
        import gzip
        open_func = gzip.open
    else:
        ext = "text"
        open_func = open

    _logger.info("reading {0} file {1}".format(ext, fp))
    # newline="" keeps "\r" for the formatter to trim
    return open_func(fp, 'rt', newline="", **kwargs)


def read_files(targets, encoding="utf-8", errors="strict"):
    """Concatenate the text of job log files.

    Args:
        targets (list[str]): File paths, directories are skipped
            with a warning.
        encoding (str)
        errors (str): Passed to open().

    Returns:
        str
    """
    l_buf = []
    for fp in targets:
        if os.path.isdir(fp):
            sys.stderr.write(
                "{0} is a directory, fail to process\n".format(fp))
            continue
        if not os.path.isfile(fp):
            raise IOError("File {0} not found".format(fp))
        with _open_file(fp, encoding=encoding, errors=errors) as f:
            text = f.read()
        if len(l_buf) > 0 and not l_buf[-1].endswith("\n"):
            l_buf.append("\n")
        l_buf.append(text)
    return "".join(l_buf)


def read_stdin(stream=None):
    if stream is None:
        stream = sys.stdin
    return stream.read()


def write_text(text, fp=None):
    """Write text followed by a line break, to fp or stdout.
    Empty text writes nothing."""
    if text != "":
        text = text + "\n"
    if fp is None:
        sys.stdout.write(text)
    else:
        with open(fp, "w", newline="") as f:
            f.write(text)
