from __future__ import annotations

from pathlib import Path

import pytest
from dateutil import tz

from dog_age_tool.config import AppSettings, load_settings, resolve_timezone
from dog_age_tool.formatting import DEFAULT_SUBJECT


def test_load_settings_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    settings = load_settings({})
    assert settings.subject == DEFAULT_SUBJECT
    assert settings.db_path.resolve() == (tmp_path / "dog_age_tool.sqlite3").resolve()
    assert settings.timezone is not None


def test_load_settings_from_environment(tmp_path: Path) -> None:
    settings = load_settings(
        {
            "DOG_AGE_DB": str(tmp_path / "pets.sqlite3"),
            "DOG_AGE_SUBJECT": "Toby",
            "DOG_AGE_TZ": "America/Argentina/Buenos_Aires",
        }
    )
    assert settings.db_path == tmp_path / "pets.sqlite3"
    assert settings.subject == "Toby"
    assert settings.timezone == tz.gettz("America/Argentina/Buenos_Aires")


def test_with_overrides_ignores_empty_values() -> None:
    base = AppSettings(subject="Toby")
    assert base.with_overrides(db_path=None, subject="", timezone=None) == base


def test_unknown_timezone_raises() -> None:
    with pytest.raises(ValueError, match="Zona horaria desconocida"):
        resolve_timezone("Nowhere/Atlantis")
    with pytest.raises(ValueError):
        load_settings({"DOG_AGE_TZ": "Nowhere/Atlantis"})
