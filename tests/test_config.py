"""Tests for startup environment detection."""

import socket
from pathlib import Path

import pytest
from pathlink.config import DEFAULT_HOSTNAME, Environment


class TestEnvironmentDetect:
    """Tests for Environment.detect()."""

    def test__reads_home_and_cwd(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """HOME and the working directory come from the process."""
        monkeypatch.setenv("HOME", "/home/alice")
        monkeypatch.chdir(tmp_path)

        environment = Environment.detect()

        assert environment.home == "/home/alice"
        assert environment.cwd == tmp_path.resolve()

    def test__home_unset__uses_empty_string(
        self,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Missing HOME is not an error."""
        monkeypatch.delenv("HOME", raising=False)

        environment = Environment.detect()

        assert environment.home == ""

    def test__hostname_lookup_fails__falls_back_to_localhost(
        self,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Hostname errors are absorbed silently."""

        def fail() -> str:
            raise OSError("no hostname")

        monkeypatch.setattr(socket, "gethostname", fail)

        environment = Environment.detect()

        assert environment.hostname == DEFAULT_HOSTNAME

    def test__empty_hostname__falls_back_to_localhost(
        self,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(socket, "gethostname", lambda: "")

        assert Environment.detect().hostname == "localhost"

    def test__uses_system_hostname(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(socket, "gethostname", lambda: "devbox")

        assert Environment.detect().hostname == "devbox"
