"""Exportación a Excel de la tabla de equivalencias de edad."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pandas as pd
from openpyxl.styles import Alignment, Border, Font, Side

_HEADER_MAP: dict[str, str] = {
    "dog_age": "狗年齡 (歲)",
    "human_age": "人類年齡 (歲)",
}

_COLUMN_WIDTHS: tuple[tuple[str, int], ...] = (
    ("狗年齡 (歲)", 14),
    ("人類年齡 (歲)", 16),
)


@dataclass(frozen=True)
class ExcelLayout:
    """Layout/formatting configuration for the chart sheet."""

    sheet_name: str = "年齡對照表"
    number_format: str = "0.0"


def write_age_chart_xlsx(df: pd.DataFrame, out_path: Path, layout: ExcelLayout) -> None:
    """Write the conversion table as a formatted Excel file.

    Args:
        df: Table with ``dog_age`` and ``human_age`` columns.
        out_path: Output path for the XLSX file.
        layout: Excel layout parameters.
    """
    out_path.parent.mkdir(parents=True, exist_ok=True)
    export_df = df.rename(columns=_HEADER_MAP)

    with pd.ExcelWriter(out_path, engine="openpyxl") as writer:
        export_df.to_excel(writer, index=False, sheet_name=layout.sheet_name)
        ws = writer.book[layout.sheet_name]
        _format_sheet(ws, layout)


def _style_header_row(ws: Any) -> None:
    thin = Side(style="thin")
    border = Border(left=thin, right=thin, top=thin, bottom=thin)
    center = Alignment(horizontal="center", vertical="center", wrap_text=True)
    for cell in ws[1]:
        cell.font = Font(bold=True)
        cell.alignment = center
        cell.border = border


def _style_body_rows(ws: Any, number_format: str) -> None:
    """Centra, pone borde y formato de un decimal a las filas de datos."""
    thin = Side(style="thin")
    border = Border(left=thin, right=thin, top=thin, bottom=thin)
    center = Alignment(horizontal="center", vertical="center")
    for row in ws.iter_rows(min_row=2):
        for cell in row:
            cell.alignment = center
            cell.border = border
            if isinstance(cell.value, int | float):
                cell.number_format = number_format


def _apply_column_widths(ws: Any) -> None:
    headers = {str(cell.value): cell.column_letter for cell in ws[1]}
    for header, width in _COLUMN_WIDTHS:
        letter = headers.get(header)
        if letter is not None:
            ws.column_dimensions[letter].width = width


def _format_sheet(ws: Any, layout: ExcelLayout) -> None:
    """Apply header style, borders, widths and number formats.

    Args:
        ws: openpyxl worksheet.
        layout: Excel layout parameters.
    """
    _style_header_row(ws)
    _style_body_rows(ws, layout.number_format)
    _apply_column_widths(ws)
