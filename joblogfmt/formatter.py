#!/usr/bin/env python
# coding: utf-8

"""
Reformat job log text into tab-separated columns.

Each non-blank line is divided into a head (typically a timestamp)
and a tail (the detail text) at the first occurrence of a separator,
and the two parts are re-joined with a run of tab characters.
"""

import logging
from typing import NamedTuple

_logger = logging.getLogger(__package__)

TAB = "\t"

# whitespace and line terminators trimmed around head and tail,
# BOM included; str.strip() would also take "\x1c"-"\x1f" and "\x85"
TRIM_CHARS = ("\t\n\v\f\r \xa0\u1680"
              "\u2000\u2001\u2002\u2003\u2004\u2005"
              "\u2006\u2007\u2008\u2009\u200a"
              "\u2028\u2029\u202f\u205f\u3000\ufeff")
LINE_SEP = "\n"

MSG_EMPTY_SEPARATOR = "separator must not be empty"
MSG_INVALID_SPACING = "columnSpacing must be a non-negative integer"


class ValidationError(ValueError):
    """Raised when a format request is rejected before processing."""
    pass


class LogEntry(NamedTuple):
    """A namedtuple of one log line divided by the separator."""
    head: str  #: text before the first separator, trimmed
    tail: str  #: remaining text with later separators kept, trimmed

    def format(self, column_spacing):
        """Join head and tail with (column_spacing + 1) tabs.
        Zero spacing still inserts one tab."""
        return self.head + TAB * (column_spacing + 1) + self.tail


class FormatRequest(NamedTuple):
    """A namedtuple of validated formatter inputs.
    Use :meth:`from_fields` to build one from raw form values.
    """
    separator: str  #: literal string dividing head and tail
    column_spacing: int  #: number of empty columns between head and tail
    job_log: str  #: raw multi-line input text

    @classmethod
    def from_fields(cls, separator, column_spacing, job_log):
        """Validate raw values and return a request.

        Args:
            separator (str): Must not be empty.
            column_spacing (int or str): Non-negative whole number.
            job_log (str): Input text.

        Raises:
            ValidationError: If separator or column_spacing is invalid.
        """
        validate_separator(separator)
        spacing = parse_column_spacing(column_spacing)
        if job_log is None:
            job_log = ""
        return cls(separator, spacing, job_log)


def validate_separator(separator):
    if not isinstance(separator, str) or len(separator) == 0:
        raise ValidationError(MSG_EMPTY_SEPARATOR)
    return separator


def parse_column_spacing(value):
    """Return column spacing as int.

    Accepts int or str representing a non-negative whole number
    (surrounding whitespace allowed). bool and float are rejected.
    """
    if isinstance(value, bool):
        raise ValidationError(MSG_INVALID_SPACING)
    elif isinstance(value, int):
        spacing = value
    elif isinstance(value, str):
        digits = value.strip()
        # ascii digits only: int() would also take "+1", "1_0" and "１"
        if not (digits.isascii() and digits.isdigit()):
            raise ValidationError(MSG_INVALID_SPACING)
        spacing = int(digits)
    else:
        raise ValidationError(MSG_INVALID_SPACING)

    if spacing < 0:
        raise ValidationError(MSG_INVALID_SPACING)
    return spacing


def trim(text):
    return text.strip(TRIM_CHARS)


def is_blank(line):
    return trim(line) == ""


def split_entry(line, separator):
    pieces = line.split(separator)
    head = trim(pieces[0])
    tail = trim(separator.join(pieces[1:]))
    return LogEntry(head, tail)


def iter_entries(job_log, separator):
    """Yield LogEntry for each non-blank line in input order."""
    for line in job_log.split(LINE_SEP):
        if is_blank(line):
            continue
        yield split_entry(line, separator)


def format_request(request):
    l_buf = [entry.format(request.column_spacing)
             for entry in iter_entries(request.job_log, request.separator)]
    _logger.debug("formatted {0} log entries".format(len(l_buf)))
    return LINE_SEP.join(l_buf)


def format_log(job_log, separator, column_spacing):
    """Reformat job log text.

    Args:
        job_log (str): Multi-line text, lines delimited by "\\n".
            Blank lines are dropped.
        separator (str): Literal string dividing head and tail.
        column_spacing (int or str): Number of empty columns;
            (column_spacing + 1) tabs are inserted.

    Returns:
        str: Formatted lines joined by "\\n".

    Raises:
        ValidationError: Before any line is processed,
            if separator or column_spacing is invalid.
    """
    request = FormatRequest.from_fields(separator, column_spacing, job_log)
    return format_request(request)
