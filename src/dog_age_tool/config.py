"""Configuracion de la app: ruta de la base, nombre de la mascota y zona horaria."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import tzinfo
from pathlib import Path

from dateutil import tz

from dog_age_tool.formatting import DEFAULT_SUBJECT

ENV_DB = "DOG_AGE_DB"
ENV_SUBJECT = "DOG_AGE_SUBJECT"
ENV_TZ = "DOG_AGE_TZ"


def _default_db_path() -> Path:
    return Path.cwd() / "dog_age_tool.sqlite3"


@dataclass(frozen=True)
class AppSettings:
    """Runtime settings shared by the CLI and the GUI."""

    db_path: Path = field(default_factory=_default_db_path)
    subject: str = DEFAULT_SUBJECT
    timezone: tzinfo = field(default_factory=tz.tzlocal)

    def with_overrides(
        self,
        *,
        db_path: str | None = None,
        subject: str | None = None,
        timezone: str | None = None,
    ) -> AppSettings:
        """Return a copy with the non-empty overrides applied."""
        out = self
        if db_path:
            out = replace(out, db_path=Path(db_path).expanduser())
        if subject:
            out = replace(out, subject=subject)
        if timezone:
            out = replace(out, timezone=resolve_timezone(timezone))
        return out


def resolve_timezone(name: str) -> tzinfo:
    """Resolve an IANA zone name.

    Raises:
        ValueError: If the zone is unknown.
    """
    zone = tz.gettz(name)
    if zone is None:
        raise ValueError(f"Zona horaria desconocida: {name}")
    return zone


def load_settings(environ: Mapping[str, str] | None = None) -> AppSettings:
    """Build settings from defaults plus ``DOG_AGE_*`` environment variables."""
    env = os.environ if environ is None else environ
    return AppSettings().with_overrides(
        db_path=env.get(ENV_DB),
        subject=env.get(ENV_SUBJECT),
        timezone=env.get(ENV_TZ),
    )
