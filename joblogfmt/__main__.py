#!/usr/bin/env python
# coding: utf-8

"""
Interface to format job logs from CLI.
"""

import sys
import logging

from . import cli
from . import common
from . import config
from . import formatter

_logger = logging.getLogger(__package__)

MSG_SEPARATOR_REQUIRED = "Separator can not be empty!"
MSG_JOB_LOG_REQUIRED = "Job log can not be empty!"


def validate_form(separator, column_spacing, job_log, max_spacing):
    """Check required fields before calling the formatter.

    Raises:
        formatter.ValidationError
    """
    if not separator:
        raise formatter.ValidationError(MSG_SEPARATOR_REQUIRED)
    spacing = formatter.parse_column_spacing(column_spacing)
    if spacing > max_spacing:
        raise formatter.ValidationError(
            "Column spacing must be between 0 and {0}!".format(max_spacing))
    if not job_log:
        raise formatter.ValidationError(MSG_JOB_LOG_REQUIRED)
    return spacing


def copy_and_wait(text, timeout):
    """Copy text to the clipboard and report the outcome on stderr.
    Returns True on success, False on failure, None if unknown."""
    from . import clipboard
    d_result = {}

    def _on_success(_text):
        d_result["success"] = True
        sys.stderr.write(clipboard.success_message() + "\n")

    def _on_failure(_exc):
        d_result["success"] = False
        sys.stderr.write(clipboard.failure_message() + "\n")

    th = clipboard.copy_to_clipboard(text, on_success=_on_success,
                                     on_failure=_on_failure)
    if th is None:
        _logger.info("nothing to copy")
        return None
    th.join(timeout)
    if th.is_alive():
        _logger.warning("clipboard copy not finished in {0} seconds".format(
            timeout))
    return d_result.get("success")


def format_job_log(ns):
    conf = config.open_config(ns.conf_path, verbose=False)
    lv = logging.DEBUG if ns.debug else logging.INFO
    ch = config.set_common_logging(conf, logger=_logger, lv=lv)
    _logger.debug("config: {0}".format(config.getname(conf) or "defaults"))
    try:
        if ns.separator is None:
            separator = conf["formatter"]["separator"]
        else:
            separator = ns.separator
        if ns.spacing is None:
            column_spacing = conf["formatter"]["column_spacing"]
        else:
            column_spacing = ns.spacing
        max_spacing = conf.getint("formatter", "max_column_spacing")

        if len(ns.files) == 0:
            job_log = common.read_stdin()
        else:
            encoding = conf["formatter"]["encoding"]
            job_log = common.read_files(common.rep_dir(ns.files),
                                        encoding=encoding)

        try:
            validate_form(separator, column_spacing, job_log, max_spacing)
            result = formatter.format_log(job_log, separator, column_spacing)
        except formatter.ValidationError as e:
            sys.exit(str(e))

        common.write_text(result, ns.output)
        if ns.copy or conf.getboolean("clipboard", "copy"):
            copy_and_wait(result, conf.getfloat("clipboard", "timeout"))
    finally:
        config.release_common_logging(ch, logger=_logger)


def conf_defaults(ns):
    config.show_default_config()


def conf_minimum(ns):
    config.config_minimum(ns.conf_path, overwrite=ns.overwrite)


# common argument settings
OPT_DEBUG = [["--debug"],
             {"dest": "debug", "action": "store_true",
              "help": "set logging level to debug (default: info)"}]
OPT_CONFIG = [["-c", "--config"],
              {"dest": "conf_path", "metavar": "CONFIG", "action": "store",
               "default": None,
               "help": "configuration file path for joblogfmt"}]
OPT_SEPARATOR = [["-s", "--separator"],
                 {"dest": "separator", "metavar": "SEPARATOR",
                  "action": "store", "default": None,
                  "help": ("string that separates the time and details "
                           "(default: formatter.separator in config); "
                           "write a separator starting with \"-\" "
                           "as --separator='->' or -s'->'")}]
OPT_SPACING = [["-n", "--column-spacing"],
               {"dest": "spacing", "metavar": "INT",
                "action": "store", "default": None,
                "help": ("number of empty columns between "
                         "the time and details "
                         "(default: formatter.column_spacing in config)")}]
OPT_OUTPUT = [["-o", "--output"],
              {"dest": "output", "metavar": "FILENAME",
               "action": "store", "default": None,
               "help": "output filename (default: stdout)"}]
OPT_COPY = [["--copy"],
            {"dest": "copy", "action": "store_true",
             "help": "copy the formatted job log to the clipboard"}]
ARG_FILES_OPT = [["files"],
                 {"metavar": "PATH", "nargs": "*",
                  "help": ("job log files or directories as input "
                           "(optional; defaultly read from stdin)")}]

# argument settings for each modes
# description, List[args, kwargs], func
DICT_ARGSET = {
    "format": ["Insert tab columns between the time and details "
               "of job log entries.",
               [OPT_CONFIG, OPT_DEBUG, OPT_SEPARATOR, OPT_SPACING,
                OPT_OUTPUT, OPT_COPY, ARG_FILES_OPT],
               format_job_log],
    "conf-defaults": ["Show default configurations.",
                      [],
                      conf_defaults],
    "conf-minimum": ["Remove default options and comments.",
                     [[["-o", "--overwrite"],
                       {"dest": "overwrite", "action": "store_true",
                        "help": "overwrite file instead of stdout dumping"}],
                      [["conf_path"],
                       {"metavar": "PATH",
                        "help": "config filepath to load"}]],
                     conf_minimum],
}


def main(argv=None):
    cli.main(DICT_ARGSET, argv)


if __name__ == "__main__":
    main()
