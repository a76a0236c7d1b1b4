#!/usr/bin/env python
# coding: utf-8

import os
import sys
import logging
import configparser

CONFIG_ENV = "JOBLOGFMT_CONFIG"
DEFAULT_CONFIG = "/".join((os.path.dirname(os.path.abspath(__file__)),
                           "data/config.conf.default"))
LOAD_SECTION = 'general'
LOAD_OPTION = 'base_filename'
IMPORT_SECTION = 'general'
IMPORT_OPTION = 'import'

LOG_FORMAT = "%(asctime)s %(levelname)s (%(processName)s) %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def getname(conf):
    """Return the loaded config file path, None for defaults only."""
    return conf.get(LOAD_SECTION, LOAD_OPTION, fallback=None)


def merge_config(conf1, conf2):
    """Overwrite conf1 with conf2."""
    for sec in conf2.sections():
        for opt in conf2.options(sec):
            if conf1.has_option(sec, opt):
                pass
            else:
                if not conf1.has_section(sec):
                    conf1[sec] = {}
                conf1.set(sec, opt, conf2[sec][opt])
    return conf1


def load_defaults(iterable_conf_path=None):
    if iterable_conf_path is None:
        iterable_conf_path = [DEFAULT_CONFIG]
    temp_conf = configparser.ConfigParser()
    for fn in iterable_conf_path:
        ret = temp_conf.read(fn)
        if len(ret) == 0:
            raise IOError("config load error ({0})".format(fn))

    return temp_conf


def _load_imports(conf):
    while conf.has_option(IMPORT_SECTION, IMPORT_OPTION):
        if conf[IMPORT_SECTION][IMPORT_OPTION] == "":
            break
        import_fn = conf[IMPORT_SECTION][IMPORT_OPTION]
        conf.remove_option(IMPORT_SECTION, IMPORT_OPTION)
        import_conf = configparser.ConfigParser()
        if os.path.exists(import_fn):
            import_conf.read(import_fn)
        else:
            raise IOError("config load error ({0})".format(import_fn))
        conf = merge_config(conf, import_conf)

    return conf


def open_config(fn=None, env=CONFIG_ENV,
                base_default=True, ignore_import=False,
                verbose=True):
    """
    Args:
        fn (str, optional): Configuration file path.
        env (str, optional): If fn is None, use Environment Variable of given name.
        base_default (bool, optional): Use joblogfmt default values for missing options.
        ignore_import (bool, optional): Ignore general.import.
        verbose (bool, optional): Notice on stderr when no file is given.

    Returns:
        configparser.ConfigParser
    """
    conf = configparser.ConfigParser()

    if fn is None and env is not None:
        fn = os.environ.get(env)

    if fn is None:
        if verbose:
            sys.stderr.write("Processing with default configuration ...\n")
    else:
        if not os.path.exists(fn):
            raise IOError("{0} not found".format(fn))
        ret = conf.read(fn)
        if len(ret) == 0:
            raise IOError("config load error ({0})".format(fn))
        if not conf.has_section(LOAD_SECTION):
            conf[LOAD_SECTION] = {}
        conf.set(LOAD_SECTION, LOAD_OPTION, fn)

    if not ignore_import:
        conf = _load_imports(conf)

    if base_default:
        merge_config(conf, load_defaults([DEFAULT_CONFIG]))

    return conf


def show_default_config():
    conf = load_defaults([DEFAULT_CONFIG])
    for section in conf.sections():
        print("[{0}]".format(section))
        for option in conf.options(section):
            print("{0} = {1}".format(option, conf[section][option]))
        print()


def write(name, conf):
    with open(name, "w") as f:
        conf.write(f)


def minimize(conf, ignore_import=False):
    """Return a new config with options different from defaults."""
    new_conf = configparser.ConfigParser()
    default_conf = load_defaults([DEFAULT_CONFIG])
    if not ignore_import:
        conf = _load_imports(conf)

    for sec in conf.sections():
        for opt in conf.options(sec):
            if sec == LOAD_SECTION and opt == LOAD_OPTION:
                continue
            if not default_conf.has_option(sec, opt):
                # undefine key in defaults
                if sec not in new_conf:
                    new_conf[sec] = {}
                new_conf[sec][opt] = conf[sec][opt]
            elif conf[sec][opt] == default_conf[sec][opt]:
                # same value from defaults
                pass
            else:
                if sec not in new_conf:
                    new_conf[sec] = {}
                new_conf[sec][opt] = conf[sec][opt]

    return new_conf


def config_minimum(fn, overwrite=False):
    conf = open_config(fn, base_default=False, ignore_import=True,
                       verbose=False)
    new_conf = minimize(conf, ignore_import=True)
    if overwrite:
        write(fn, new_conf)
    else:
        new_conf.write(sys.stdout)


def _iter_loggers(logger=None, logger_name=None):
    temp_loggers = []
    if logger is None:
        pass
    elif isinstance(logger, list):
        temp_loggers += logger
    elif isinstance(logger, logging.Logger):
        temp_loggers.append(logger)
    else:
        raise TypeError
    if logger_name is None:
        pass
    elif isinstance(logger_name, list):
        temp_loggers += [logging.getLogger(ln) for ln in logger_name]
    elif isinstance(logger_name, str):
        temp_loggers.append(logging.getLogger(logger_name))
    else:
        raise TypeError
    return temp_loggers


# common objects for logging
def set_common_logging(conf, logger=None, logger_name=None,
                       lv=logging.INFO):
    """
    Args:
        conf
        logger (logging.Logger or list[logging.Logger])
        logger_name (str or list[str])
        lv (int): logging level
    Returns:
        logging.SomeHandler
    """
    fn = conf.get("general", "logging")
    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)
    if fn == "":
        ch = logging.StreamHandler()
    else:
        ch = logging.FileHandler(fn)
    ch.setFormatter(fmt)
    ch.setLevel(lv)

    for temp_logger in _iter_loggers(logger, logger_name):
        temp_logger.setLevel(lv)
        temp_logger.addHandler(ch)
        if lv <= logging.DEBUG:
            temp_logger.debug("logger is on debug mode")

    return ch


def release_common_logging(ch, logger=None, logger_name=None):
    for temp_logger in _iter_loggers(logger, logger_name):
        temp_logger.removeHandler(ch)
    ch.close()
