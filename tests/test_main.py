"""Tests for the action entry point."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

from vatcheck import main as main_module


class TestMain:
    def test_masks_key_and_exits_zero(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv("INPUT_VAT-NUMBERS", "DE123456789")
        monkeypatch.setenv("INPUT_API-KEY", "very-secret-key")

        with patch.object(main_module, "run_action", new=AsyncMock()) as mock_run:
            exit_code = main_module.main()

        assert exit_code == 0
        mock_run.assert_awaited_once()
        assert "::add-mask::very-secret-key" in capsys.readouterr().out

    def test_failed_run_exits_one(self, monkeypatch) -> None:
        monkeypatch.setenv("INPUT_VAT-NUMBERS", "")
        monkeypatch.setenv("INPUT_API-KEY", "key")

        async def _fail(inputs, reporter, client=None, api=None):
            reporter.fail("No VAT numbers provided")

        with patch.object(main_module, "run_action", new=_fail):
            assert main_module.main() == 1

    def test_bad_settings_reported_as_failure(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv("LOG_LEVEL", "verbose")

        with patch.object(main_module, "run_action", new=AsyncMock()) as mock_run:
            exit_code = main_module.main()

        assert exit_code == 1
        mock_run.assert_not_awaited()
        out = capsys.readouterr().out
        assert out.startswith("::error::Action failed: ")
        assert "Invalid log level: verbose" in out

    def test_dotenv_in_working_directory_ignored(self, tmp_path, monkeypatch) -> None:
        (tmp_path / ".env").write_text("LOG_LEVEL=verbose\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.setenv("INPUT_VAT-NUMBERS", "DE123456789")
        monkeypatch.setenv("INPUT_API-KEY", "key")

        with patch.object(main_module, "run_action", new=AsyncMock()):
            assert main_module.main() == 0
