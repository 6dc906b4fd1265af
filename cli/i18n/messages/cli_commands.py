"""
cli/i18n/messages/cli_commands.py - CLI Command Messages

Contains translations for the command line help, progress and error messages.
"""

from __future__ import annotations

CLI_MESSAGES = {
    # =========================================================================
    # Help
    # =========================================================================
    "help_main": {
        "ko": "실행 중인 EC2/RDS 인스턴스와 예약 인스턴스를 대조합니다 (읽기 전용).",
        "en": "Reconcile running EC2/RDS instances against reserved instances (read-only).",
    },
    "help_accesskey": {
        "ko": "액세스 키 (또는 AWS_ACCESS_KEY_ID/AWS_ACCESS_KEY 환경변수)",
        "en": "access key (or use AWS_ACCESS_KEY_ID/AWS_ACCESS_KEY env vars)",
    },
    "help_secretkey": {
        "ko": "시크릿 키 (또는 AWS_SECRET_ACCESS_KEY/AWS_SECRET_KEY 환경변수)",
        "en": "secret key (or use AWS_SECRET_ACCESS_KEY/AWS_SECRET_KEY env vars)",
    },
    "help_profile": {
        "ko": "AWS 프로파일",
        "en": "AWS profile",
    },
    "help_region": {
        "ko": "리전 (다중 가능)",
        "en": "AWS region (repeatable)",
    },
    "help_format": {
        "ko": "출력 형식",
        "en": "Output format",
    },
    "help_output": {
        "ko": "출력 파일 경로 (json, excel)",
        "en": "Output file path (json, excel)",
    },
    # =========================================================================
    # Progress / result
    # =========================================================================
    "auditing": {
        "ko": "예약 인스턴스 감사 중: {regions}",
        "en": "Auditing reservations: {regions}",
    },
    "report_saved": {
        "ko": "보고서 저장: {path}",
        "en": "Report saved: {path}",
    },
    # =========================================================================
    # Errors
    # =========================================================================
    "error": {
        "ko": "오류: {message}",
        "en": "Error: {message}",
    },
    "cancelled": {
        "ko": "취소됨",
        "en": "Cancelled",
    },
}
