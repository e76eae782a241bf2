import argparse
import unittest

from tripoly import opts

flag = opts.Option("test-flag", bool, False)
enabled = opts.Option("test-enabled", bool, True)
ratio = opts.Option("test-ratio", float, 0.5)
count = opts.Option("test-count", int, 3)

class TestOptions(unittest.TestCase):

    def setUp(self):
        self.snap = opts.snapshot()

    def tearDown(self):
        opts.restore(self.snap)

    def parse(self, argv):
        parser = argparse.ArgumentParser()
        opts.setup(parser)
        opts.read(parser.parse_args(argv))

    def test_defaults(self):
        self.parse([])
        self.assertEqual(flag.value, False)
        self.assertEqual(enabled.value, True)
        self.assertEqual(ratio.value, 0.5)
        self.assertEqual(count.value, 3)

    def test_values_are_converted(self):
        self.parse(["--test-flag", "--no-test-enabled", "--test-ratio", "0.25", "--test-count", "7"])
        self.assertEqual(flag.value, True)
        self.assertEqual(enabled.value, False)
        self.assertEqual(ratio.value, 0.25)
        self.assertEqual(count.value, 7)

    def test_snapshot_restore(self):
        count.value = 10
        snap = opts.snapshot()
        count.value = 11
        opts.restore(snap)
        self.assertEqual(count.value, 10)

    def test_no_implicit_bool(self):
        with self.assertRaises(Exception):
            if flag:
                pass
