# core/tools/io - 파일 출력 모듈
"""
파일 출력 유틸리티

구조:
    core/tools/io/excel/  - Excel 파일 쓰기 (보고서 출력)
"""
