from __future__ import annotations

from pathlib import Path
from typing import cast

import pandas as pd
from openpyxl import load_workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from fit_tracker.actioninfo import info
from fit_tracker.excel_writer import ExcelLayout, write_report_xlsx
from fit_tracker.model import PersonalProfile
from fit_tracker.records.daysteps import DaySteps
from fit_tracker.summary import results_to_frame


def test_write_report_xlsx_happy_path_and_formatting(tmp_path: Path) -> None:
    """Una fila por línea: cabeceras en ruso, formatos numéricos y anchos."""
    profile = PersonalProfile(name="a", weight=75.5, height=1.80)
    df = results_to_frame(info(["1000,1h30m", "0,1h"], DaySteps(profile)))
    out = tmp_path / "nested" / "out.xlsx"
    write_report_xlsx(df, out, ExcelLayout())

    wb = load_workbook(out)
    ws = cast(Worksheet, wb[ExcelLayout().sheet_name])

    headers = [cell.value for cell in ws[1]]
    assert headers[0] == "№"
    assert "Шаги" in headers
    assert "Калории\n(ккал)" in headers
    assert "steps" not in headers

    steps_col = headers.index("Шаги") + 1
    dist_col = headers.index("Дистанция\n(км)") + 1
    err_col = headers.index("Ошибка") + 1
    assert ws.cell(row=2, column=steps_col).value == 1000
    assert ws.cell(row=2, column=dist_col).value == 0.81
    assert ws.cell(row=3, column=steps_col).value in ("", None)
    assert "positive integer" in str(ws.cell(row=3, column=err_col).value)

    assert ws.column_dimensions["A"].width == 6
    assert ws.column_dimensions[get_column_letter(steps_col)].width == 10
    assert ws.cell(row=2, column=steps_col).number_format == "#,##0"
    assert ws.cell(row=2, column=dist_col).number_format == "0.00"
    assert ws.cell(row=1, column=1).font.bold is True
    assert ws.cell(row=2, column=1).alignment.horizontal == "center"


def test_write_report_xlsx_ignores_unknown_columns(tmp_path: Path) -> None:
    df = pd.DataFrame({"Solo": [1], "steps": [1500]})
    out = tmp_path / "out.xlsx"
    write_report_xlsx(df, out, ExcelLayout(sheet_name="Hoja"))
    ws = load_workbook(out)["Hoja"]
    assert [c.value for c in ws[1]] == ["Solo", "Шаги"]
    assert ws.cell(row=2, column=2).number_format == "#,##0"
