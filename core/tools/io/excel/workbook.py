"""
core/tools/io/excel/workbook.py - openpyxl Workbook 래퍼

컬럼 정의 기반으로 헤더/데이터/요약 행 스타일을 일관되게 적용합니다.

사용 예시:
    from core.tools.io.excel import ColumnDef, Workbook

    wb = Workbook(lang="en")
    sheet = wb.new_sheet(
        name="EC2 On-demand",
        columns=[
            ColumnDef(header="인스턴스 클래스", header_en="Instance class", width=20),
            ColumnDef(header="개수", header_en="Count", width=10, style="number"),
        ],
    )
    sheet.add_row(["m3.large", 2])
    sheet.add_summary_row(["합계", 2])
    wb.save(Path("report.xlsx"))
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from openpyxl import Workbook as OpenpyxlWorkbook
from openpyxl.utils import get_column_letter

from .styles import COLUMN_STYLES, get_data_font, get_header_style, get_summary_fill, get_summary_font, get_thin_border

logger = logging.getLogger(__name__)

# Excel 시트 이름 최대 길이
MAX_SHEET_NAME = 31


@dataclass
class ColumnDef:
    """컬럼 정의"""

    header: str
    header_en: str | None = None
    width: int = 15
    style: str = "data"  # data, center, number, text

    def get_header(self, lang: str = "ko") -> str:
        if lang == "en" and self.header_en:
            return self.header_en
        return self.header


class Sheet:
    """스타일이 적용되는 워크시트"""

    def __init__(self, ws: Any, columns: list[ColumnDef], lang: str = "ko"):
        self._ws = ws
        self._columns = columns
        self._next_row = 2
        self.row_count = 0

        header_style = get_header_style()
        for idx, col in enumerate(columns, start=1):
            cell = ws.cell(row=1, column=idx, value=col.get_header(lang))
            for attr, value in header_style.items():
                setattr(cell, attr, value)
            ws.column_dimensions[get_column_letter(idx)].width = col.width
        ws.freeze_panes = "A2"

    def _write(self, values: list[Any], summary: bool = False) -> int:
        row = self._next_row
        border = get_thin_border()
        for idx, value in enumerate(values, start=1):
            cell = self._ws.cell(row=row, column=idx, value=value)
            style = self._columns[idx - 1].style if idx <= len(self._columns) else "data"
            alignment, number_format = COLUMN_STYLES.get(style, COLUMN_STYLES["data"])
            cell.alignment = alignment
            cell.border = border
            if number_format:
                cell.number_format = number_format
            if summary:
                cell.font = get_summary_font()
                cell.fill = get_summary_fill()
            else:
                cell.font = get_data_font()
        self._next_row += 1
        return row

    def add_row(self, values: list[Any]) -> int:
        """데이터 행 추가, 행 번호 반환"""
        self.row_count += 1
        return self._write(values)

    def add_summary_row(self, values: list[Any]) -> int:
        """요약(합계) 행 추가"""
        return self._write(values, summary=True)


class Workbook:
    """openpyxl Workbook 래퍼"""

    def __init__(self, lang: str = "ko"):
        self._lang = lang
        self._wb = OpenpyxlWorkbook()
        self._sheets: list[Sheet] = []

    def new_sheet(self, name: str, columns: list[ColumnDef]) -> Sheet:
        """새 시트 생성 (첫 시트는 기본 시트를 재사용)"""
        title = name[:MAX_SHEET_NAME]
        if not self._sheets:
            ws = self._wb.active
            ws.title = title
        else:
            ws = self._wb.create_sheet(title=title)

        sheet = Sheet(ws, columns, lang=self._lang)
        self._sheets.append(sheet)
        return sheet

    def save(self, filepath: Path) -> Path:
        """파일 저장 (상위 디렉토리 자동 생성)"""
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        self._wb.save(filepath)
        logger.debug(f"Excel 저장: {filepath}")
        return filepath
