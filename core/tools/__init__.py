# core/tools - 보고서 출력 도구
"""
보고서 출력에 쓰이는 공용 도구 (Excel 등)
"""
