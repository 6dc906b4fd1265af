"""
cli/i18n/messages/report.py - Report Messages

Bucket headers, column names and summary lines for the reservation report.
"""

from __future__ import annotations

REPORT_MESSAGES = {
    # =========================================================================
    # Bucket headers
    # =========================================================================
    "ec2_on_demand": {
        "ko": "온디맨드 EC2 인스턴스:",
        "en": "On-demand EC2 instances:",
    },
    "ec2_unused": {
        "ko": "미사용 EC2 예약:",
        "en": "Unused EC2 reservations:",
    },
    "rds_on_demand": {
        "ko": "온디맨드 RDS 인스턴스:",
        "en": "On-demand RDS instances:",
    },
    "rds_unused": {
        "ko": "미사용 RDS 예약:",
        "en": "Unused RDS reservations:",
    },
    # =========================================================================
    # Columns
    # =========================================================================
    "col_region": {
        "ko": "리전",
        "en": "Region",
    },
    "col_class": {
        "ko": "인스턴스 클래스",
        "en": "Instance class",
    },
    "col_vpc": {
        "ko": "VPC",
        "en": "VPC",
    },
    "col_product": {
        "ko": "엔진/제품",
        "en": "Engine/Product",
    },
    "col_multi_az": {
        "ko": "Multi-AZ",
        "en": "Multi-AZ",
    },
    "col_count": {
        "ko": "개수",
        "en": "Count",
    },
    # =========================================================================
    # Summary
    # =========================================================================
    "region_title": {
        "ko": "리전: {region}",
        "en": "Region: {region}",
    },
    "all_reserved": {
        "ko": "온디맨드 인스턴스와 미사용 예약이 없습니다",
        "en": "No on-demand instances or unused reservations",
    },
    "records_fetched": {
        "ko": "조회: EC2 {running_ec2}개 / 예약 {reserved_ec2}건, RDS {running_rds}개 / 예약 {reserved_rds}건",
        "en": "Fetched: EC2 {running_ec2} / {reserved_ec2} reservations, RDS {running_rds} / {reserved_rds} reservations",
    },
    "sheet_ec2_on_demand": {
        "ko": "EC2 온디맨드",
        "en": "EC2 On-demand",
    },
    "sheet_ec2_unused": {
        "ko": "EC2 미사용 예약",
        "en": "EC2 Unused RI",
    },
    "sheet_rds_on_demand": {
        "ko": "RDS 온디맨드",
        "en": "RDS On-demand",
    },
    "sheet_rds_unused": {
        "ko": "RDS 미사용 예약",
        "en": "RDS Unused RI",
    },
    "total": {
        "ko": "합계",
        "en": "Total",
    },
}
