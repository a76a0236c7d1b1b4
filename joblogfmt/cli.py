#!/usr/bin/env python
# coding: utf-8

"""argparse wrapper"""

import os
import sys
import argparse


def usage(d_argset, command_path):
    buf_usage = [
        ("usage: " + command_path + " SUBCOMMAND [options and arguments] ..."),
        "",
        "subcommands: "
    ]
    buf_usage += ["  {0}: {1}".format(key, argset[0])
                  for key, argset in sorted(d_argset.items())]
    buf_usage += [
        "",
        ("try \"" + command_path + " SUBCOMMAND -h\" "
         "to refer detailed subcommand usage")
    ]
    return "\n".join(buf_usage)


def build_parser(prog, desc, l_argset):
    ap = argparse.ArgumentParser(prog=prog, description=desc)
    for args, kwargs in l_argset:
        ap.add_argument(*args, **kwargs)
    return ap


def main(d_argset, argv=None):
    """Dispatch a subcommand.

    Args:
        d_argset (dict): subcommand name ->
            [description, List[args, kwargs], func]
        argv (list[str], optional): Defaults to sys.argv.
    """
    if argv is None:
        argv = sys.argv
    command_path = os.path.basename(argv[0])

    if len(argv) < 2 or argv[1] in ("-h", "--help"):
        sys.exit(usage(d_argset, command_path))
    mode = argv[1]
    if mode not in d_argset:
        sys.exit("invalid subcommand {0}\n\n{1}".format(
            mode, usage(d_argset, command_path)))

    desc, l_argset, func = d_argset[mode]
    ap = build_parser(" ".join((command_path, mode)), desc, l_argset)
    ns = ap.parse_args(argv[2:])
    return func(ns)
