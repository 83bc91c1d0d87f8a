"""CLI para calcular la edad del perro y su equivalente humano."""

from __future__ import annotations

import argparse
import logging
import re
from pathlib import Path

from dog_age_tool.chart import age_chart
from dog_age_tool.config import AppSettings, load_settings
from dog_age_tool.controller import AgeController
from dog_age_tool.excel_writer import ExcelLayout, write_age_chart_xlsx
from dog_age_tool.storage import PetAgeStore, SQLiteStore

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"<[^>]+>")


class _ArgDateInput:
    """Date field backed by the ``--birthday`` flag."""

    def __init__(self, value: str | None) -> None:
        self.value = value

    def get_value(self) -> str | None:
        return self.value

    def set_value(self, value: str) -> None:
        self.value = value


def html_to_text(markup: str) -> str:
    """Strip ``<strong>`` markers and turn ``<br>`` into newlines."""
    return _TAG_RE.sub("", markup.replace("<br>", "\n"))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed argparse namespace.
    """
    parser = argparse.ArgumentParser(
        description="Edad del perro en años y su equivalente humano."
    )
    parser.add_argument(
        "--birthday",
        default=None,
        help="Fecha de nacimiento YYYY-MM-DD (sin ella se usa la guardada).",
    )
    parser.add_argument("--db", default=None, help="Archivo SQLite.")
    parser.add_argument("--subject", default=None, help="Nombre de la mascota.")
    parser.add_argument("--tz", default=None, help="Zona horaria IANA.")
    parser.add_argument(
        "--chart-out",
        default=None,
        help="Exporta la tabla de equivalencias a este XLSX.",
    )
    parser.add_argument(
        "--max-years",
        type=float,
        default=20.0,
        help="Última edad de la tabla (default: 20).",
    )
    parser.add_argument("--verbose", action="store_true", help="Log en DEBUG.")
    ns = parser.parse_args(argv)
    if ns.max_years <= 0:
        parser.error("--max-years debe ser positivo")
    return ns


def build_controller(
    settings: AppSettings, date_input: _ArgDateInput, shown: list[str]
) -> AgeController:
    store = PetAgeStore(SQLiteStore(settings.db_path))
    return AgeController(
        date_input,
        shown.append,
        store,
        subject=settings.subject,
        tzinfo=settings.timezone,
    )


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Returns:
        Exit code (0 when a result was shown or exported).
    """
    ns = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    settings = load_settings().with_overrides(
        db_path=ns.db, subject=ns.subject, timezone=ns.tz
    )

    if ns.chart_out:
        out_path = Path(ns.chart_out).expanduser()
        write_age_chart_xlsx(age_chart(ns.max_years), out_path, ExcelLayout())
        print(f"OK: Output: {out_path}")
        return 0

    shown: list[str] = []
    date_input = _ArgDateInput(ns.birthday)
    controller = build_controller(settings, date_input, shown)
    if ns.birthday is not None:
        result = controller.on_calculate()
    else:
        result = controller.on_ready()

    message = shown[-1] if shown else ""
    if result is None or not message:
        logger.info("Sin resultado para %r", date_input.value)
        return 1
    print(html_to_text(message))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
