"""Tests für das Konfigurationssystem und die CLI."""

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner
from pydantic import ValidationError

from config.schema import DateMode, LessonCardConfig
from config.defaults import default_config
from config.manager import ConfigManager
from main import cli


# ─── SCHEMA ───────────────────────────────────────────────────────────────────

class TestSchema:
    def test_default_config_valid(self):
        config = default_config()
        assert config.date_mode == DateMode.DATE
        assert config.strict_replacement is True

    def test_date_mode_from_string(self):
        config = LessonCardConfig.model_validate({"date_mode": "datetime"})
        assert config.date_mode == DateMode.DATETIME

    def test_invalid_date_mode_rejected(self):
        with pytest.raises(ValidationError):
            LessonCardConfig.model_validate({"date_mode": "week"})


# ─── MANAGER ──────────────────────────────────────────────────────────────────

class TestConfigManager:
    def test_save_and_load_roundtrip(self, tmp_path: Path):
        path = tmp_path / "lesson_card.yaml"
        mgr = ConfigManager(path)
        assert mgr.first_run_check()

        original = LessonCardConfig(date_mode=DateMode.DATETIME, strict_replacement=False)
        mgr.save(original)

        assert not mgr.first_run_check()
        assert mgr.load() == original

    def test_saved_file_has_header_and_comments(self, tmp_path: Path):
        path = tmp_path / "lesson_card.yaml"
        ConfigManager(path).save(default_config())
        text = path.read_text(encoding="utf-8")
        assert text.startswith("# ====")
        assert "Unterrichtskarte" in text
        assert "date_mode: date" in text
        assert "# date = nur Kalendertag" in text

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            ConfigManager(tmp_path / "fehlt.yaml").load()

    def test_invalid_file_raises_value_error(self, tmp_path: Path):
        path = tmp_path / "kaputt.yaml"
        path.write_text("date_mode: woche\n", encoding="utf-8")
        with pytest.raises(ValueError, match="ungültig"):
            ConfigManager(path).load()

    def test_unparsable_yaml_raises_value_error(self, tmp_path: Path):
        path = tmp_path / "kaputt.yaml"
        path.write_text("date_mode: [unclosed\n", encoding="utf-8")
        with pytest.raises(ValueError, match="ungültig"):
            ConfigManager(path).load()

    def test_load_or_default_without_file(self, tmp_path: Path):
        config = ConfigManager(tmp_path / "fehlt.yaml").load_or_default()
        assert config == default_config()


# ─── CLI ──────────────────────────────────────────────────────────────────────

@pytest.fixture
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


class TestCli:
    def test_config_init_and_show(self, tmp_path: Path):
        path = tmp_path / "lesson_card.yaml"
        runner = CliRunner()
        result = runner.invoke(cli, ["config", "init", "--path", str(path)])
        assert result.exit_code == 0, result.output
        assert path.exists()

        result = runner.invoke(cli, ["config", "show", "--path", str(path)])
        assert result.exit_code == 0, result.output
        assert "date_mode" in result.output

    def test_config_init_does_not_overwrite(self, tmp_path: Path):
        path = tmp_path / "lesson_card.yaml"
        path.write_text("date_mode: datetime\n", encoding="utf-8")
        result = CliRunner().invoke(cli, ["config", "init", "--path", str(path)])
        assert result.exit_code == 0
        assert "existiert bereits" in result.output
        assert path.read_text(encoding="utf-8") == "date_mode: datetime\n"

    def test_classify_empty(self, tmp_path: Path):
        result = CliRunner().invoke(
            cli, ["classify", "--config", str(tmp_path / "fehlt.yaml")])
        assert result.exit_code == 0, result.output
        assert "Leere Zelle" in result.output

    def test_classify_rescheduled(self, tmp_path: Path):
        result = CliRunner().invoke(cli, [
            "classify", "--date", "2024-03-01", "--replaced",
            "--replacement-date", "2024-03-08",
            "--config", str(tmp_path / "fehlt.yaml"),
        ])
        assert result.exit_code == 0, result.output
        assert "rescheduled" in result.output
        assert "2024-03-08" in result.output

    def test_classify_inconsistent_exits_with_error(self, tmp_path: Path):
        result = CliRunner().invoke(cli, [
            "classify", "--date", "2024-03-01", "--replaced",
            "--config", str(tmp_path / "fehlt.yaml"),
        ])
        assert result.exit_code == 1
        assert "Ersatzdatum" in result.output

    def test_classify_with_invalid_config_exits(self, tmp_path: Path):
        path = tmp_path / "kaputt.yaml"
        path.write_text("strict_replacement: vielleicht\n", encoding="utf-8")
        result = CliRunner().invoke(cli, [
            "classify", "--date", "2024-03-01", "--config", str(path)])
        assert result.exit_code == 1

    def test_classify_with_unparsable_config_exits(self, tmp_path: Path):
        path = tmp_path / "kaputt.yaml"
        path.write_text("date_mode: [unclosed\n", encoding="utf-8")
        result = CliRunner().invoke(cli, [
            "classify", "--date", "2024-03-01", "--config", str(path)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "ungültig" in result.output

    def test_verbose_switches_to_debug(self, tmp_path: Path, restore_root_level, caplog):
        result = CliRunner().invoke(cli, [
            "-v", "classify", "--date", "2024-03-01",
            "--replacement-date", "2024-03-08",
            "--config", str(tmp_path / "fehlt.yaml"),
        ])
        assert result.exit_code == 0, result.output
        assert logging.getLogger().level == logging.DEBUG
        assert "ignoriert" in caplog.text

    def test_default_log_level_is_warning(self, tmp_path: Path, restore_root_level):
        result = CliRunner().invoke(cli, [
            "classify", "--config", str(tmp_path / "fehlt.yaml")])
        assert result.exit_code == 0, result.output
        assert logging.getLogger().level == logging.WARNING
