"""
tests/core/tools/io/excel/test_workbook.py - Excel Workbook 래퍼 테스트
"""

from openpyxl import load_workbook

from core.tools.io.excel import ColumnDef, Workbook
from core.tools.io.excel.styles import NUMBER_FORMAT_INTEGER


def _columns():
    return [
        ColumnDef(header="인스턴스 클래스", header_en="Instance class", width=20),
        ColumnDef(header="개수", header_en="Count", width=10, style="number"),
    ]


class TestColumnDef:
    def test_header_by_lang(self):
        col = ColumnDef(header="개수", header_en="Count")

        assert col.get_header("ko") == "개수"
        assert col.get_header("en") == "Count"

    def test_header_en_missing(self):
        assert ColumnDef(header="VPC").get_header("en") == "VPC"


class TestWorkbook:
    """Workbook / Sheet 테스트"""

    def test_first_sheet_reuses_active(self, tmp_path):
        wb = Workbook(lang="en")
        wb.new_sheet("First", _columns())
        wb.new_sheet("Second", _columns())

        path = wb.save(tmp_path / "out.xlsx")

        assert load_workbook(path).sheetnames == ["First", "Second"]

    def test_headers_and_rows(self, tmp_path):
        wb = Workbook(lang="ko")
        sheet = wb.new_sheet("EC2", _columns())

        assert sheet.add_row(["m3.large", 2]) == 2
        assert sheet.add_row(["t3.micro", 1]) == 3
        assert sheet.add_summary_row(["합계", 3]) == 4
        assert sheet.row_count == 2

        ws = load_workbook(wb.save(tmp_path / "out.xlsx"))["EC2"]
        assert [c.value for c in ws[1]] == ["인스턴스 클래스", "개수"]
        assert ws["B2"].value == 2
        assert ws["B2"].number_format == NUMBER_FORMAT_INTEGER
        assert ws["A4"].font.bold
        assert ws.freeze_panes == "A2"
        assert ws.column_dimensions["A"].width == 20

    def test_long_sheet_name_truncated(self, tmp_path):
        wb = Workbook()
        wb.new_sheet("x" * 40, _columns())

        path = wb.save(tmp_path / "nested" / "out.xlsx")

        assert load_workbook(path).sheetnames == ["x" * 31]
