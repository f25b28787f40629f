"""Tests for the ``python -m dexstitch`` entry point."""

from __future__ import annotations

import io
import unittest
from contextlib import redirect_stdout
from unittest import mock

from dexstitch.__main__ import USAGE, main


class TestEntryPoint(unittest.TestCase):

    def test_help_prints_usage(self):
        out = io.StringIO()
        with mock.patch("sys.argv", ["dexstitch", "--help"]), redirect_stdout(out):
            main()
        self.assertIn(USAGE, out.getvalue())
        self.assertIn("--log-level", out.getvalue())

    def test_unknown_command_exits(self):
        out = io.StringIO()
        with mock.patch("sys.argv", ["dexstitch", "nest"]), redirect_stdout(out):
            with self.assertRaises(SystemExit) as ctx:
                main()
        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("Unknown command: nest", out.getvalue())

    def test_serve_passes_host_and_port(self):
        with mock.patch("sys.argv", ["dexstitch", "serve", "--port", "3000",
                                     "--host", "0.0.0.0"]), \
                mock.patch("dexstitch.web.server.main") as serve, \
                mock.patch("logging.basicConfig"):
            main()
        serve.assert_called_once_with(host="0.0.0.0", port=3000)


if __name__ == "__main__":
    unittest.main()
