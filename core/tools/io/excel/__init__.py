# core/tools/io/excel - Excel 출력 양식 (공통 스타일, 헬퍼)
"""
Excel 스타일 및 Workbook 유틸리티.

사용 예시:
    from core.tools.io.excel import ColumnDef, Workbook

    wb = Workbook(lang="ko")
    sheet = wb.new_sheet(name="결과", columns=[ColumnDef(header="ID", width=20)])
    sheet.add_row(["m3.large"])
    wb.save(Path("report.xlsx"))
"""

from .workbook import ColumnDef, Sheet, Workbook

__all__ = ["ColumnDef", "Sheet", "Workbook"]
