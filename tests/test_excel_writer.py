import os

from openpyxl import load_workbook

from tires_parser.excel_writer import DEFAULT_HEADERS_UK, sheet_title_for, write_records_to_excel
from tires_parser.types import TireRecord


def test_write_records_to_excel(tmp_path):
    records = [
        TireRecord(name="Nokian Hakka R5 DOT2021", price=129.0, year=2021),
        TireRecord(name="Pirelli Ice Zero -STUD", price=97.5),
    ]

    path = write_records_to_excel(records, "Зимові шини", out_dir=str(tmp_path))

    assert path == os.path.join(str(tmp_path), "Зимові шини.xlsx")
    wb = load_workbook(path)
    ws = wb["Зимові шини"]
    rows = list(ws.iter_rows(values_only=True))
    assert list(rows[0]) == DEFAULT_HEADERS_UK
    assert rows[1][:3] == ("Nokian Hakka R5 DOT2021", 8, 2021)
    assert rows[1][3] in (None, "")
    assert rows[1][4] == 129.0
    assert rows[2][0] == "Pirelli Ice Zero -STUD"
    assert rows[2][2] is None
    assert rows[2][4] == 97.5


def test_write_records_to_excel_without_records(tmp_path, capsys):
    assert write_records_to_excel([], "Empty", out_dir=str(tmp_path)) is None
    assert os.listdir(str(tmp_path)) == []
    assert "Empty" in capsys.readouterr().err


def test_write_records_to_excel_sanitizes_titles(tmp_path):
    path = write_records_to_excel(
        [TireRecord(name="Tire", price=30.0)], "205/55 R16", out_dir=str(tmp_path)
    )
    assert os.path.basename(path) == "205_55 R16.xlsx"
    assert load_workbook(path).sheetnames == ["205_55 R16"]


def test_sheet_title_for():
    assert sheet_title_for("a" * 40) == "a" * 31
    assert sheet_title_for("x:y?[z]") == "x_y__z_"
    assert sheet_title_for("") == "Sheet1"
