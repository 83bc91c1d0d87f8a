"""Persistencia SQLite clave/valor para cumpleaños y edades calculadas."""

from __future__ import annotations

import logging
import math
import sqlite3
from dataclasses import dataclass
from pathlib import Path

from dog_age_tool.formatting import format_one_decimal
from dog_age_tool.model import StoredRecord

logger = logging.getLogger(__name__)

KEY_BIRTHDAY = "dogBirthday"
KEY_DOG_AGE = "dogAge"
KEY_HUMAN_AGE = "humanAge"

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS app_state (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""

# Any of these means "storage unavailable" (locked, read-only, disk full...).
_STORAGE_ERRORS = (sqlite3.Error, OSError)


@dataclass(frozen=True)
class StoreResult:
    """Outcome of a write. Callers may ignore it."""

    ok: bool
    error: str | None = None


class SQLiteStore:
    """String key/value slots in a SQLite file.

    Every key holds one text value; a missing key means "no value". Failures
    propagate as ``sqlite3.Error``/``OSError``; ``PetAgeStore`` absorbs them.
    """

    def __init__(self, db_path: Path) -> None:
        self._db_path = db_path
        self._schema_ready = False

    @property
    def db_path(self) -> Path:
        return self._db_path

    def _connect(self) -> sqlite3.Connection:
        if not self._schema_ready:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        if not self._schema_ready:
            try:
                conn.executescript(SCHEMA_SQL)
            except sqlite3.Error:
                conn.close()
                raise
            self._schema_ready = True
        return conn

    def get_items(self, keys: list[str]) -> dict[str, str]:
        """Devuelve los valores presentes para ``keys`` (los ausentes se omiten)."""
        placeholders = ",".join("?" for _ in keys)
        conn = self._connect()
        try:
            rows = conn.execute(
                f"SELECT key, value FROM app_state WHERE key IN ({placeholders})",
                tuple(keys),
            ).fetchall()
        finally:
            conn.close()
        return {str(row["key"]): str(row["value"]) for row in rows}

    def set_items(self, items: dict[str, str]) -> None:
        """Upsert every item in a single transaction."""
        if not items:
            return
        conn = self._connect()
        try:
            with conn:
                conn.executemany(
                    """
                    INSERT INTO app_state(key, value) VALUES(?, ?)
                    ON CONFLICT(key) DO UPDATE SET value=excluded.value
                    """,
                    list(items.items()),
                )
        finally:
            conn.close()


class PetAgeStore:
    """The three slots (birthday, dog age, human age) over a ``SQLiteStore``.

    Storage failures never escape: writes return ``StoreResult(ok=False)`` and
    reads return an empty ``StoredRecord``.
    """

    def __init__(self, backend: SQLiteStore) -> None:
        self._backend = backend

    def set_birthday(self, birthday: str) -> StoreResult:
        return self.save(birthday)

    def set_dog_age(self, dog_age: float) -> StoreResult:
        return self.save(None, dog_age=dog_age)

    def set_human_age(self, human_age: float) -> StoreResult:
        return self.save(None, human_age=human_age)

    def save(
        self,
        birthday: str | None,
        dog_age: float | None = None,
        human_age: float | None = None,
    ) -> StoreResult:
        """Write the given slots; ages are stored as one-decimal text.

        Args:
            birthday: ISO date string, or None to leave the slot untouched.
            dog_age: Dog age in years, or None to leave the slot untouched.
            human_age: Human-equivalent age, or None to leave it untouched.

        Returns:
            Write outcome.
        """
        items: dict[str, str] = {}
        if birthday is not None:
            items[KEY_BIRTHDAY] = birthday
        if dog_age is not None:
            items[KEY_DOG_AGE] = format_one_decimal(dog_age)
        if human_age is not None:
            items[KEY_HUMAN_AGE] = format_one_decimal(human_age)
        try:
            self._backend.set_items(items)
        except _STORAGE_ERRORS as exc:
            logger.warning("No se pudo guardar en %s: %s", self._backend.db_path, exc)
            return StoreResult(ok=False, error=f"{type(exc).__name__}: {exc}")
        return StoreResult(ok=True)

    def get_all(self) -> StoredRecord:
        """Read the three slots; missing or unreadable values are None."""
        try:
            values = self._backend.get_items(
                [KEY_BIRTHDAY, KEY_DOG_AGE, KEY_HUMAN_AGE]
            )
        except _STORAGE_ERRORS as exc:
            logger.warning("No se pudo leer %s: %s", self._backend.db_path, exc)
            return StoredRecord()
        return StoredRecord(
            birthday=values.get(KEY_BIRTHDAY) or None,
            dog_age=_parse_number(values.get(KEY_DOG_AGE)),
            human_age=_parse_number(values.get(KEY_HUMAN_AGE)),
        )


def _parse_number(raw: str | None) -> float | None:
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        logger.debug("Valor numerico invalido en storage: %r", raw)
        return None
    if not math.isfinite(value):
        return None
    return value
