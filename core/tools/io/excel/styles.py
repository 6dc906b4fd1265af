"""
core/tools/io/excel/styles.py - Excel 스타일 상수 및 유틸리티

보고서 Excel 출력을 위한 색상, 정렬, 숫자 포맷 상수
"""

from typing import Any, Dict

from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

# =============================================================================
# 색상 상수 (RGB Hex)
# =============================================================================

COLOR_HEADER_BG = "4472C4"  # 헤더 배경 (파란색)
COLOR_HEADER_FG = "FFFFFF"  # 헤더 글자 (흰색)
COLOR_SUMMARY_BG = "FFF2CC"  # 요약 배경 (연한 노랑)

# =============================================================================
# 숫자 포맷 상수
# =============================================================================

NUMBER_FORMAT_INTEGER = "#,##0"  # 정수 (1,234)
NUMBER_FORMAT_TEXT = "@"  # 텍스트 (문자열로 강제)

# =============================================================================
# 정렬 상수
# =============================================================================

ALIGN_LEFT = Alignment(horizontal="left", vertical="center", wrap_text=False)
ALIGN_CENTER = Alignment(horizontal="center", vertical="center", wrap_text=False)
ALIGN_RIGHT = Alignment(horizontal="right", vertical="center", wrap_text=False)
ALIGN_CENTER_WRAP = Alignment(horizontal="center", vertical="center", wrap_text=True)


def get_thin_border() -> Border:
    """얇은 테두리 스타일 반환"""
    thin_side = Side(style="thin", color="808080")
    return Border(
        left=thin_side,
        right=thin_side,
        top=thin_side,
        bottom=thin_side,
    )


def get_header_font() -> Font:
    """헤더 폰트 스타일 반환"""
    return Font(name="맑은 고딕", size=10, bold=True, color=COLOR_HEADER_FG)


def get_data_font() -> Font:
    """데이터 폰트 스타일 반환"""
    return Font(name="맑은 고딕", size=10, bold=False)


def get_summary_font() -> Font:
    """요약 행 폰트 스타일 반환"""
    return Font(name="맑은 고딕", size=10, bold=True)


def get_header_fill() -> PatternFill:
    """헤더 채우기 스타일"""
    return PatternFill(start_color=COLOR_HEADER_BG, end_color=COLOR_HEADER_BG, fill_type="solid")


def get_summary_fill() -> PatternFill:
    """요약 행 채우기 스타일"""
    return PatternFill(start_color=COLOR_SUMMARY_BG, end_color=COLOR_SUMMARY_BG, fill_type="solid")


def get_header_style() -> Dict[str, Any]:
    """헤더 스타일 dict 반환 (셀 적용용)"""
    return {
        "font": get_header_font(),
        "fill": get_header_fill(),
        "alignment": ALIGN_CENTER_WRAP,
        "border": get_thin_border(),
    }


# ColumnDef.style → (정렬, 숫자 포맷)
COLUMN_STYLES: Dict[str, tuple] = {
    "data": (ALIGN_LEFT, None),
    "center": (ALIGN_CENTER, None),
    "number": (ALIGN_RIGHT, NUMBER_FORMAT_INTEGER),
    "text": (ALIGN_LEFT, NUMBER_FORMAT_TEXT),
}
