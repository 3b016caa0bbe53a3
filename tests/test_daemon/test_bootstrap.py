"""Tests for daemon detection and startup."""

from unittest.mock import MagicMock, patch

import pytest

from ollama_rename.daemon.bootstrap import detect_platform, ensure_running, start_daemon
from ollama_rename.errors import BootstrapError, CliFallbackError
from ollama_rename.testing import create_mock_fallback


def _client(probes: list[bool]) -> MagicMock:
    client = MagicMock()
    client.base_url = "http://127.0.0.1:11434"
    client.probe.side_effect = probes
    return client


class TestDetectPlatform:
    """Tests for platform detection."""

    @patch("ollama_rename.daemon.bootstrap.platform_mod.system", return_value="Windows")
    def test_windows(self, mock_system: MagicMock) -> None:
        """Windows is detected as windows."""
        assert detect_platform() == "windows"

    @pytest.mark.parametrize("system", ["Linux", "Darwin"])
    def test_posix(self, system: str) -> None:
        """Everything else is posix."""
        with patch(
            "ollama_rename.daemon.bootstrap.platform_mod.system", return_value=system
        ):
            assert detect_platform() == "posix"


class TestStartDaemon:
    """Tests for start_daemon()."""

    @patch("ollama_rename.daemon.bootstrap.detect_platform", return_value="posix")
    def test_posix_spawns_serve(self, mock_detect: MagicMock) -> None:
        """On posix the binary is served in the background."""
        fallback = create_mock_fallback()
        start_daemon(fallback)
        fallback.serve.assert_called_once()

    @patch("ollama_rename.daemon.bootstrap.detect_platform", return_value="posix")
    def test_posix_spawn_failure(self, mock_detect: MagicMock) -> None:
        """A spawn failure becomes a BootstrapError."""
        fallback = create_mock_fallback()
        fallback.serve.side_effect = CliFallbackError(["ollama", "serve"], None, "nope")
        with pytest.raises(BootstrapError, match="Failed to start Ollama"):
            start_daemon(fallback)

    @patch("ollama_rename.daemon.bootstrap.subprocess")
    @patch("ollama_rename.daemon.bootstrap.detect_platform", return_value="windows")
    def test_windows_service_first(
        self, mock_detect: MagicMock, mock_subprocess: MagicMock
    ) -> None:
        """On Windows a successful `sc start` needs no console launch."""
        mock_subprocess.run.return_value.returncode = 0
        start_daemon(create_mock_fallback())
        assert mock_subprocess.run.call_args[0][0] == ["sc", "start", "Ollama"]
        mock_subprocess.Popen.assert_not_called()

    @patch("ollama_rename.daemon.bootstrap.subprocess")
    @patch("ollama_rename.daemon.bootstrap.detect_platform", return_value="windows")
    def test_windows_falls_back_to_console(
        self, mock_detect: MagicMock, mock_subprocess: MagicMock
    ) -> None:
        """If the service does not start, serve in a new console window."""
        mock_subprocess.run.return_value.returncode = 1060
        start_daemon(create_mock_fallback())
        assert mock_subprocess.Popen.call_args[0][0] == [
            "cmd",
            "/C",
            "start",
            "ollama",
            "serve",
        ]


class TestEnsureRunning:
    """Tests for ensure_running()."""

    @patch("ollama_rename.daemon.bootstrap.start_daemon")
    def test_already_running(self, mock_start: MagicMock) -> None:
        """Nothing is started when the first probe succeeds."""
        client = _client([True])
        fallback = create_mock_fallback()
        ensure_running(client, fallback, MagicMock())
        mock_start.assert_not_called()
        fallback.available.assert_not_called()

    @patch("ollama_rename.daemon.bootstrap.start_daemon")
    def test_missing_binary_is_fatal(self, mock_start: MagicMock) -> None:
        """Without the binary the daemon cannot be started."""
        with pytest.raises(BootstrapError, match="Ollama CLI not found"):
            ensure_running(_client([False]), create_mock_fallback(False), MagicMock())
        mock_start.assert_not_called()

    @patch("ollama_rename.daemon.bootstrap.time.sleep")
    @patch("ollama_rename.daemon.bootstrap.start_daemon")
    def test_starts_and_polls_until_ready(
        self, mock_start: MagicMock, mock_sleep: MagicMock
    ) -> None:
        """Polling stops at the first successful probe."""
        client = _client([False, False, False, True])
        ensure_running(client, create_mock_fallback(), MagicMock())
        mock_start.assert_called_once()
        assert client.probe.call_count == 4
        assert mock_sleep.call_count == 2
        mock_sleep.assert_called_with(1.0)

    @patch("ollama_rename.daemon.bootstrap.time.sleep")
    @patch("ollama_rename.daemon.bootstrap.start_daemon")
    def test_times_out_after_attempts(
        self, mock_start: MagicMock, mock_sleep: MagicMock
    ) -> None:
        """After 30 failed probes startup is abandoned."""
        client = _client([False] * 31)
        with pytest.raises(BootstrapError, match="timeout"):
            ensure_running(client, create_mock_fallback(), MagicMock())
        assert client.probe.call_count == 31
        assert mock_sleep.call_count == 30
