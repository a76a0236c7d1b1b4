
"""
A job log formatter.
The main function is to split job log entries
into time and details on a separator,
and to insert tab columns between them
for pasting into spreadsheets.
"""

__version__ = '0.1.0'

from .formatter import ValidationError, LogEntry, FormatRequest, format_log
from .clipboard import copy_to_clipboard
