"""
plugins/reservations/report.py - 감사 결과 출력

형식:
- console: 버킷별 Rich 테이블
- text: 버킷마다 한 줄 헤더 + 키별 한 줄 (탭 구분, 파이프라인 친화적)
- json: 리전별 버킷 목록
- excel: 버킷별 시트

비어 있는 버킷은 출력하지 않습니다. 키는 정렬하여 출력이 항상 같습니다.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

from cli.i18n import get_lang, t
from core.tools.io.excel import ColumnDef, Workbook

from .types import EC2GroupKey, RDSGroupKey, RegionAudit

logger = logging.getLogger(__name__)

# 버킷: (메시지 키, 종류, 버킷 속성)
BUCKETS = (
    ("ec2_on_demand", "ec2", "on_demand"),
    ("ec2_unused", "ec2", "unused"),
    ("rds_on_demand", "rds", "on_demand"),
    ("rds_unused", "rds", "unused"),
)


def _bucket(audit: RegionAudit, kind: str, attr: str) -> list[tuple[Any, int]]:
    return sorted(getattr(getattr(audit, kind), attr).items())


def _row(key: EC2GroupKey | RDSGroupKey) -> list[str]:
    if isinstance(key, EC2GroupKey):
        return [key.instance_class, key.vpc_label]
    return [key.instance_class, key.product, key.multi_az_label]


def _columns(kind: str) -> list[str]:
    if kind == "ec2":
        return ["report.col_class", "report.col_vpc"]
    return ["report.col_class", "report.col_product", "report.col_multi_az"]


# =============================================================================
# text
# =============================================================================


def format_line(key: EC2GroupKey | RDSGroupKey, count: int) -> str:
    """키 한 줄: EC2 "%20s\\t%5s\\t%d", RDS "%20s\\t%10s\\t%9s\\t%d" """
    if isinstance(key, EC2GroupKey):
        return f"{key.instance_class:>20}\t{key.vpc_label:>5}\t{count}"
    return f"{key.instance_class:>20}\t{key.product:>10}\t{key.multi_az_label:>9}\t{count}"


def render_text(audits: list[RegionAudit], lang: str | None = None) -> str:
    """텍스트 보고서 (여러 리전이면 리전 제목 추가)"""
    lines: list[str] = []
    multi_region = len(audits) > 1

    for audit in audits:
        if multi_region:
            lines.append("")
            lines.append(t("report.region_title", lang=lang, region=audit.region))
        for message_key, kind, attr in BUCKETS:
            items = _bucket(audit, kind, attr)
            if not items:
                continue
            lines.append("")
            lines.append(t(f"report.{message_key}", lang=lang))
            lines.extend(format_line(key, count) for key, count in items)

    return "\n".join(lines)


# =============================================================================
# console
# =============================================================================


def print_console(audits: list[RegionAudit], console: Console, lang: str | None = None) -> None:
    """Rich 테이블 출력"""
    for audit in audits:
        console.print()
        console.print(f"[bold cyan]{t('report.region_title', lang=lang, region=audit.region)}[/bold cyan]")
        if audit.record_counts:
            console.print(f"[dim]{t('report.records_fetched', lang=lang, **audit.record_counts)}[/dim]")

        if audit.is_clean:
            console.print(f"[green]{t('report.all_reserved', lang=lang)}[/green]")
            continue

        for message_key, kind, attr in BUCKETS:
            items = _bucket(audit, kind, attr)
            if not items:
                continue

            style = "yellow" if attr == "on_demand" else "red"
            table = Table(title=t(f"report.{message_key}", lang=lang), title_style=f"bold {style}", title_justify="left")
            for column in _columns(kind):
                table.add_column(t(column, lang=lang))
            table.add_column(t("report.col_count", lang=lang), justify="right")

            for key, count in items:
                table.add_row(*_row(key), str(count))
            console.print(table)


# =============================================================================
# json
# =============================================================================


def to_dict(audits: list[RegionAudit]) -> dict[str, Any]:
    """JSON 직렬화용 dict"""
    regions = []
    for audit in audits:
        entry: dict[str, Any] = {"region": audit.region, "record_counts": dict(audit.record_counts)}
        for kind in ("ec2", "rds"):
            classification = getattr(audit, kind)
            entry[kind] = {
                attr: [{**key.to_dict(), "count": count} for key, count in sorted(getattr(classification, attr).items())]
                for attr in ("on_demand", "unused")
            }
        regions.append(entry)
    return {"regions": regions}


def write_json(audits: list[RegionAudit], filepath: Path) -> Path:
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(to_dict(audits), f, indent=2, ensure_ascii=False)
    logger.debug(f"JSON 저장: {filepath}")
    return filepath


# =============================================================================
# excel
# =============================================================================

# 컬럼 메시지 키 → (너비, 스타일)
_EXCEL_COLUMNS = {
    "report.col_region": (16, "center"),
    "report.col_class": (20, "data"),
    "report.col_vpc": (8, "center"),
    "report.col_product": (20, "data"),
    "report.col_multi_az": (10, "center"),
    "report.col_count": (10, "number"),
}


def write_excel(audits: list[RegionAudit], filepath: Path, lang: str | None = None) -> Path:
    """버킷별 시트로 Excel 저장 (빈 버킷도 시트는 생성)"""
    lang = lang or get_lang()
    wb = Workbook(lang=lang)

    for message_key, kind, attr in BUCKETS:
        keys = ["report.col_region", *_columns(kind), "report.col_count"]
        columns = [
            ColumnDef(
                header=t(key, lang="ko"),
                header_en=t(key, lang="en"),
                width=_EXCEL_COLUMNS[key][0],
                style=_EXCEL_COLUMNS[key][1],
            )
            for key in keys
        ]
        sheet = wb.new_sheet(name=t(f"report.sheet_{message_key}", lang=lang), columns=columns)

        total = 0
        for audit in audits:
            for key, count in _bucket(audit, kind, attr):
                sheet.add_row([audit.region, *_row(key), count])
                total += count
        if sheet.row_count:
            sheet.add_summary_row([t("report.total", lang=lang), *([""] * (len(keys) - 2)), total])

    return wb.save(filepath)
