#!/usr/bin/env python
# coding: utf-8

import os
import sys
import unittest

TEST_DIR = os.path.dirname(os.path.abspath(__file__))


def suite():
    test_suite = unittest.TestSuite()
    l_suite = unittest.defaultTestLoader.discover(
        TEST_DIR, pattern="test_*.py",
        top_level_dir=os.path.dirname(TEST_DIR))
    for ts in l_suite:
        test_suite.addTest(ts)
    return test_suite


if __name__ == "__main__":
    s = suite()
    ret = unittest.TextTestRunner().run(s)
    sys.exit(not ret.wasSuccessful())
