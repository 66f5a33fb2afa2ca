"""Generación de Excel formateado con el resumen de actividad."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pandas as pd
from openpyxl.styles import Alignment, Border, Font, Side
from openpyxl.utils import get_column_letter


@dataclass(frozen=True)
class ColumnStyle:
    """Header text, width and number format of one exported column."""

    header: str
    width: int
    number_format: str | None = None


_COLUMNS: dict[str, ColumnStyle] = {
    "line_no": ColumnStyle("№", 6),
    "line": ColumnStyle("Строка", 22),
    "kind": ColumnStyle("Тип", 10),
    "steps": ColumnStyle("Шаги", 10, "#,##0"),
    "duration_h": ColumnStyle("Длительность\n(ч)", 13, "0.00"),
    "distance_km": ColumnStyle("Дистанция\n(км)", 11, "0.00"),
    "speed_kmh": ColumnStyle("Скорость\n(км/ч)", 10, "0.00"),
    "calories_kcal": ColumnStyle("Калории\n(ккал)", 10, "0.00"),
    "error": ColumnStyle("Ошибка", 40),
}


@dataclass(frozen=True)
class ExcelLayout:
    """Layout/formatting configuration for the report sheet."""

    sheet_name: str = "Отчет"


def write_report_xlsx(df: pd.DataFrame, out_path: Path, layout: ExcelLayout) -> None:
    """Write the batch summary as a formatted Excel sheet.

    Args:
        df: Summary DataFrame (see ``summary.results_to_frame``).
        out_path: Output path for the XLSX file.
        layout: Excel layout parameters.
    """
    out_path.parent.mkdir(parents=True, exist_ok=True)

    styles = [_COLUMNS.get(str(col)) for col in df.columns]
    export_df = df.rename(columns={k: v.header for k, v in _COLUMNS.items()})

    with pd.ExcelWriter(out_path, engine="openpyxl") as writer:
        export_df.to_excel(writer, index=False, sheet_name=layout.sheet_name)
        ws = writer.book[layout.sheet_name]
        _style_cells(ws)
        _apply_column_styles(ws, styles)


def _style_cells(ws: Any) -> None:
    """Borde fino y centrado en todas las celdas; cabecera en negrita."""
    thin = Side(style="thin")
    border = Border(left=thin, right=thin, top=thin, bottom=thin)
    center = Alignment(horizontal="center", vertical="center", wrap_text=True)
    for row in ws.iter_rows():
        for cell in row:
            cell.alignment = center
            cell.border = border
            if cell.row == 1:
                cell.font = Font(bold=True)


def _apply_column_styles(ws: Any, styles: list[ColumnStyle | None]) -> None:
    """Anchos y formatos numéricos por columna; columnas sin estilo se ignoran."""
    for idx, style in enumerate(styles, start=1):
        if style is None:
            continue
        ws.column_dimensions[get_column_letter(idx)].width = style.width
        if style.number_format is None:
            continue
        for (cell,) in ws.iter_rows(min_row=2, min_col=idx, max_col=idx):
            cell.number_format = style.number_format
