"""Unit tests for start_server module."""

import unittest
from unittest.mock import patch

import start_server


class TestStartServer(unittest.TestCase):
    """Tests for the Gunicorn start script."""

    @patch("start_server.run")
    def test_main_configures_and_runs_gunicorn(self, mock_run):
        """Test that main() sets argv for the WSGI app and starts Gunicorn."""
        with patch("start_server.sys") as mock_sys:
            start_server.main()

        mock_run.assert_called_once()
        self.assertEqual(mock_sys.argv[1], "alert_service.wsgi:application")

    def test_argv_respects_environment(self):
        """Test that bind and worker settings come from the environment."""
        with patch.dict("os.environ", {"GUNICORN_BIND": "127.0.0.1:9000", "GUNICORN_WORKERS": "2"}):
            argv = start_server.build_gunicorn_argv()

        self.assertEqual(argv[argv.index("--bind") + 1], "127.0.0.1:9000")
        self.assertEqual(argv[argv.index("--workers") + 1], "2")


if __name__ == "__main__":
    unittest.main()
