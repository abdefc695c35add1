"""Konfigurationsmanager: Laden und Speichern der Kartenkonfiguration.

Nutzt ruamel.yaml für YAML-Serialisierung mit Kommentaren.
"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Optional

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap

from config.schema import LessonCardConfig

logger = logging.getLogger(__name__)

yaml = YAML()
yaml.default_flow_style = False
yaml.width = 120


_YAML_HEADER = f"""\
# ============================================
# Unterrichtskarte — Konfiguration
# Erstellt: {date.today().isoformat()}
# ============================================
"""

_FIELD_COMMENTS = {
    "date_mode": "date = nur Kalendertag, datetime = exakter Zeitpunkt",
    "strict_replacement": "true = verlegt ohne Ersatzdatum ist ein Fehler",
}


class ConfigManager:
    CONFIG_DIR = Path("config")
    DEFAULT_CONFIG = CONFIG_DIR / "lesson_card.yaml"

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else self.DEFAULT_CONFIG

    def first_run_check(self) -> bool:
        """Gibt True zurück wenn noch keine Config existiert."""
        return not self.path.exists()

    # ─── Laden ───

    def load(self, path: Optional[Path] = None) -> LessonCardConfig:
        """Lade Config aus YAML. Validiert automatisch via Pydantic."""
        target = Path(path) if path is not None else self.path
        if not target.exists():
            raise FileNotFoundError(
                f"Konfigurationsdatei nicht gefunden: {target}\n"
                f"Führen Sie 'python main.py config init' aus."
            )
        try:
            with open(target, "r", encoding="utf-8") as f:
                raw = yaml.load(f)
            config = LessonCardConfig.model_validate(dict(raw or {}))
        except Exception as e:
            raise ValueError(
                f"Konfigurationsdatei ungültig: {target}\n"
                f"Fehler: {e}"
            ) from e
        logger.debug("Konfiguration geladen: %s", target)
        return config

    def load_or_default(self) -> LessonCardConfig:
        """Wie load(), liefert aber Defaults wenn keine Datei existiert."""
        if self.first_run_check():
            from config.defaults import default_config
            return default_config()
        return self.load()

    # ─── Speichern ───

    def save(self, config: LessonCardConfig, path: Optional[Path] = None) -> Path:
        """Speichere Config als YAML mit Kommentaren."""
        target = Path(path) if path is not None else self.path
        target.parent.mkdir(parents=True, exist_ok=True)

        data = self._build_commented_yaml(config)
        with open(target, "w", encoding="utf-8") as f:
            f.write(_YAML_HEADER + "\n")
            yaml.dump(data, f)

        logger.info("Konfiguration gespeichert: %s", target)
        return target

    def _build_commented_yaml(self, config: LessonCardConfig) -> CommentedMap:
        raw = json.loads(config.model_dump_json())
        cm = CommentedMap(raw)
        for field, comment in _FIELD_COMMENTS.items():
            if field in cm:
                cm.yaml_add_eol_comment(comment, field)
        return cm
