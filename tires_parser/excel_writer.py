from __future__ import annotations

import os
import re
import sys
from typing import Optional, Sequence

from openpyxl import Workbook

from .messages import DEFAULT_LANG, msg
from .types import TireRecord


DEFAULT_HEADERS_UK = [
    "Товар",
    "Кількість",
    "Рік",
    "Країна",
    "Ціна (евро)",
]

SHEET_TITLE_MAX = 31
INVALID_SHEET_CHARS_RE = re.compile(r"[\\/*?:\[\]]")
INVALID_FILE_CHARS_RE = re.compile(r"[\\/]")


def sheet_title_for(name: str) -> str:
    title = INVALID_SHEET_CHARS_RE.sub("_", name)[:SHEET_TITLE_MAX]
    return title or "Sheet1"


def write_records_to_excel(
    records: Sequence[TireRecord],
    sheet_title: str,
    out_dir: str = ".",
    lang: str = DEFAULT_LANG,
) -> Optional[str]:
    """
    Save records to `{out_dir}/{sheet_title}.xlsx`. Returns the path, or None
    when there is nothing to save.
    """
    if not records:
        print(msg(lang, "no_data", name=sheet_title), file=sys.stderr, flush=True)
        return None

    wb = Workbook()
    ws = wb.active
    ws.title = sheet_title_for(sheet_title)

    for col_idx, title in enumerate(DEFAULT_HEADERS_UK, start=1):
        ws.cell(row=1, column=col_idx).value = title

    for idx, r in enumerate(records, start=2):
        ws.cell(row=idx, column=1).value = r.name
        ws.cell(row=idx, column=2).value = r.quantity
        # Missing year stays an empty cell
        ws.cell(row=idx, column=3).value = r.year or None
        ws.cell(row=idx, column=4).value = r.country
        ws.cell(row=idx, column=5).value = r.price

    filename = INVALID_FILE_CHARS_RE.sub("_", sheet_title) + ".xlsx"
    out_path = os.path.join(out_dir, filename)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    wb.save(out_path)

    print(msg(lang, "saved", name=sheet_title, count=len(records)), flush=True)
    return out_path
