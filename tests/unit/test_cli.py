"""Tests for the command-line entry point."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from prompt_dialog import cli
from prompt_dialog.errors import DiscoveryError
from prompt_dialog.server.models import ResolvedServer


class TestBuildParser:
    """Tests for build_parser function."""

    def test_parses_port_debug_and_params(self) -> None:
        args = cli.build_parser().parse_args(["--port", "4096", "--debug", "path=src", "lang=py"])

        assert args.port == 4096
        assert args.debug is True
        assert args.params == ["path=src", "lang=py"]

    def test_defaults(self) -> None:
        args = cli.build_parser().parse_args([])

        assert args.port is None
        assert args.debug is False
        assert args.params == []

    @pytest.mark.parametrize("value", ["abc", "65536", "-1"])
    def test_rejects_invalid_port(self, value: str) -> None:
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([f"--port={value}"])


class TestMain:
    """Tests for main function."""

    def _patch_runtime(self, discovery_result):
        runner = MagicMock()

        def _run(coro):
            coro.close()
            if isinstance(discovery_result, Exception):
                raise discovery_result
            return discovery_result

        runner.run = MagicMock(side_effect=_run)
        view = MagicMock()
        return runner, view

    def test_connected_run(self) -> None:
        server = ResolvedServer(pid=3, port=4096, cwd=Path("/work"))
        runner, view = self._patch_runtime(server)

        with patch.object(cli, "AsyncRunner", return_value=runner), patch.object(
            cli, "_create_view", return_value=view
        ) as create_view, patch.object(cli, "setup_logging"):
            exit_code = cli.main(["path=src"])

        assert exit_code == 0
        create_view.assert_called_once_with(["@clipboard", "@path"])
        view.set_connected.assert_called_once_with(True)
        view.run.assert_called_once_with()
        runner.close.assert_called_once_with()

    def test_discovery_failure_still_opens_window(self) -> None:
        runner, view = self._patch_runtime(DiscoveryError("No opencode processes found"))

        with patch.object(cli, "AsyncRunner", return_value=runner), patch.object(
            cli, "_create_view", return_value=view
        ), patch.object(cli, "setup_logging"):
            exit_code = cli.main([])

        assert exit_code == 0
        view.set_connected.assert_called_once_with(False)
        view.set_error_text.assert_called_once_with("No opencode processes found")

    def test_window_creation_failure_exits_with_error(self) -> None:
        runner, _view = self._patch_runtime(DiscoveryError("none"))

        with patch.object(cli, "AsyncRunner", return_value=runner), patch.object(
            cli, "_create_view", return_value=None
        ), patch.object(cli, "setup_logging"):
            exit_code = cli.main([])

        assert exit_code == 1
        runner.close.assert_called_once_with()

    def test_invalid_configuration_exits_with_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROMPT_DIALOG_TIMEOUT_SECONDS", "soon")

        with patch.object(cli, "setup_logging"), patch.object(cli, "AsyncRunner") as runner_cls:
            exit_code = cli.main([])

        assert exit_code == 2
        runner_cls.assert_not_called()
