#!/usr/bin/env python
# coding: utf-8

import unittest

from joblogfmt import formatter
from joblogfmt.formatter import ValidationError, LogEntry, FormatRequest


class TestFormatLog(unittest.TestCase):

    def test_single_line(self):
        ret = formatter.format_log("08:00 - Task completed", "-", "2")
        self.assertEqual(ret, "08:00\t\t\tTask completed")

    def test_multiple_lines(self):
        job_log = "09:15-Started build\n09:20-Finished build"
        ret = formatter.format_log(job_log, "-", "0")
        self.assertEqual(ret, "09:15\tStarted build\n09:20\tFinished build")

    def test_blank_line_dropped(self):
        ret = formatter.format_log("A-1\n\nB-2", "-", "0")
        self.assertEqual(ret, "A\t1\nB\t2")

    def test_whitespace_line_dropped(self):
        ret = formatter.format_log("A-1\n  \t \nB-2\n", "-", 0)
        self.assertEqual(ret, "A\t1\nB\t2")

    def test_separator_in_details(self):
        ret = formatter.format_log("A-B-C", "-", "0")
        self.assertEqual(ret, "A\tB-C")

    def test_consecutive_separators(self):
        ret = formatter.format_log("A--B", "-", 0)
        self.assertEqual(ret, "A\t-B")

    def test_no_separator(self):
        ret = formatter.format_log("  just a note  ", "-", 1)
        self.assertEqual(ret, "just a note\t\t")

    def test_multi_char_separator(self):
        ret = formatter.format_log("10:00 :: deploy :: done", "::", 0)
        self.assertEqual(ret, "10:00\tdeploy :: done")

    def test_separator_is_literal(self):
        ret = formatter.format_log("10.00.x", ".", 0)
        self.assertEqual(ret, "10\t00.x")
        ret = formatter.format_log("a|b", "|", 0)
        self.assertEqual(ret, "a\tb")

    def test_bom_line_dropped(self):
        ret = formatter.format_log("A-1\n\ufeff\n\ufeffB - 2\ufeff", "-", 0)
        self.assertEqual(ret, "A\t1\nB\t2")

    def test_trimmed_characters(self):
        entry = formatter.split_entry("\u3000A -\xa0 1\u2028", "-")
        self.assertEqual(entry, LogEntry("A", "1"))
        # control characters outside the trim set are kept
        entry = formatter.split_entry("A\x1cA - 1\x85", "-")
        self.assertEqual(entry, LogEntry("A\x1cA", "1\x85"))
        self.assertEqual(formatter.format_log("\x1f", "-", 0), "\x1f\t")

    def test_crlf_input(self):
        ret = formatter.format_log("A - 1\r\n\r\nB - 2\r\n", "-", 0)
        self.assertEqual(ret, "A\t1\nB\t2")

    def test_empty_input(self):
        self.assertEqual(formatter.format_log("", "-", 2), "")
        self.assertEqual(formatter.format_log("\n \n\t\n", "-", 2), "")

    def test_tab_count(self):
        for k in range(0, 15):
            ret = formatter.format_log("08:00-work", "-", k)
            head, _, rest = ret.partition("\t")
            self.assertEqual(head, "08:00")
            self.assertEqual(ret.count("\t"), k + 1)
            self.assertEqual(rest.lstrip("\t"), "work")

    def test_large_spacing_accepted(self):
        ret = formatter.format_log("a-b", "-", 20)
        self.assertEqual(ret, "a" + "\t" * 21 + "b")

    def test_order_preserved(self):
        lines = ["{0:02d}:00 - step {0}".format(i) for i in range(50)]
        ret = formatter.format_log("\n".join(lines), "-", 0)
        l_out = ret.split("\n")
        self.assertEqual(len(l_out), 50)
        for i, line in enumerate(l_out):
            self.assertEqual(line, "{0:02d}:00\tstep {0}".format(i))

    def test_rerun_keeps_lines(self):
        job_log = "A-1\n\n\nB-2\n  \nC-3"
        ret1 = formatter.format_log(job_log, "-", 1)
        ret2 = formatter.format_log(ret1, "-", 1)
        self.assertEqual(len(ret2.split("\n")), len(ret1.split("\n")))


class TestValidation(unittest.TestCase):

    def test_empty_separator(self):
        with self.assertRaises(ValidationError) as cm:
            formatter.format_log("A-1", "", "2")
        self.assertEqual(str(cm.exception), "separator must not be empty")

    def test_empty_separator_with_bad_spacing(self):
        with self.assertRaises(ValidationError):
            formatter.format_log("", "", "-1")

    def test_none_separator(self):
        with self.assertRaises(ValidationError):
            formatter.format_log("A-1", None, 0)

    def test_negative_spacing(self):
        for val in ("-1", -1):
            with self.assertRaises(ValidationError) as cm:
                formatter.format_log("A-1", "-", val)
            self.assertEqual(str(cm.exception),
                             "columnSpacing must be a non-negative integer")

    def test_invalid_spacing(self):
        for val in ("", "abc", "1.5", "+1", "1_0", 1.0, True, None, []):
            with self.assertRaises(ValidationError):
                formatter.format_log("A-1", "-", val)

    def test_spacing_string(self):
        self.assertEqual(formatter.parse_column_spacing(" 3 "), 3)
        self.assertEqual(formatter.parse_column_spacing("0"), 0)
        self.assertEqual(formatter.parse_column_spacing(7), 7)

    def test_is_value_error(self):
        self.assertTrue(issubclass(ValidationError, ValueError))


class TestEntries(unittest.TestCase):

    def test_split_entry(self):
        entry = formatter.split_entry(" 08:00 -  a - b ", "-")
        self.assertEqual(entry, LogEntry("08:00", "a - b"))

    def test_split_entry_without_separator(self):
        entry = formatter.split_entry("08:00 note", "-")
        self.assertEqual(entry.head, "08:00 note")
        self.assertEqual(entry.tail, "")

    def test_iter_entries(self):
        l_entry = list(formatter.iter_entries("a-1\n\n b - 2 \n", "-"))
        self.assertEqual(l_entry, [LogEntry("a", "1"), LogEntry("b", "2")])

    def test_entry_format(self):
        self.assertEqual(LogEntry("a", "b").format(0), "a\tb")
        self.assertEqual(LogEntry("a", "").format(2), "a\t\t\t")

    def test_request(self):
        request = FormatRequest.from_fields("-", "2", "08:00 - x")
        self.assertEqual(request.column_spacing, 2)
        self.assertEqual(formatter.format_request(request), "08:00\t\t\tx")

    def test_request_none_log(self):
        request = FormatRequest.from_fields("-", 0, None)
        self.assertEqual(formatter.format_request(request), "")


if __name__ == "__main__":
    unittest.main()
