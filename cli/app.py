"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.

명령어 구조:
    aws-reservations                            # 기본 리전 감사 (콘솔 테이블)
    aws-reservations -r us-west-1 -r us-east-1  # 다중 리전
    aws-reservations -f text                    # 탭 구분 텍스트
    aws-reservations -f json -o result.json     # JSON 파일
    aws-reservations -f excel                   # Excel 파일 (자동 파일명)
    aws-reservations --version

흐름:
    1. 자격 증명 결정 (키 옵션 > --profile > 환경변수 > 기본 체인)
    2. 리전 검증
    3. 리전별 감사 패스 (조회 실패 시 보고서 없이 종료)
    4. 보고서 출력

종료 코드:
    0: 성공
    1: 오류 (조회 실패, 설정 오류)
    130: 사용자 취소
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

import click

from cli.i18n import SUPPORTED_LANGS, get_lang, set_lang, t
from core.config import OUTPUT_FORMATS, get_default_region, get_env_bool, get_version, settings
from core.exceptions import ARError, format_error_for_user, is_access_denied

# WARNING 레벨로 설정하여 INFO 로그가 도구 출력에 섞이지 않도록 함
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)

VERSION = get_version()

# 파일로 저장하는 형식 → 확장자
FILE_FORMATS = {"json": "json", "excel": "xlsx"}


def default_output_path(fmt: str, now: datetime | None = None) -> Path:
    """파일 형식 기본 경로: reservations-YYYYMMDD-HHMMSS.<ext>"""
    now = now or datetime.now()
    return Path(f"{settings.OUTPUT_FILE_PREFIX}-{now:%Y%m%d-%H%M%S}.{FILE_FORMATS[fmt]}")


@click.command(help=t("cli.help_main", lang="en"))
@click.option("--accesskey", "access_key", default=None, help=t("cli.help_accesskey", lang="en"))
@click.option("--secretkey", "secret_key", default=None, help=t("cli.help_secretkey", lang="en"))
@click.option("-p", "--profile", "profile", default=None, help=t("cli.help_profile", lang="en"))
@click.option("-r", "--region", "regions", multiple=True, help=t("cli.help_region", lang="en"))
@click.option(
    "-f",
    "--format",
    "fmt",
    type=click.Choice(OUTPUT_FORMATS),
    default="console",
    show_default=True,
    help=t("cli.help_format", lang="en"),
)
@click.option("-o", "--output", "output", type=click.Path(dir_okay=False), default=None, help=t("cli.help_output", lang="en"))
@click.option("--lang", "lang", type=click.Choice(SUPPORTED_LANGS), default=None, help="ko | en")
@click.option("--debug", is_flag=True, help="Debug logging")
@click.version_option(VERSION, prog_name="aws-reservations")
def cli(
    access_key: str | None,
    secret_key: str | None,
    profile: str | None,
    regions: tuple[str, ...],
    fmt: str,
    output: str | None,
    lang: str | None,
    debug: bool,
) -> None:
    """예약 인스턴스 감사 실행"""
    from cli.ui import console, print_error, print_success, setup_debug_logging

    if lang:
        set_lang(lang)
    debug = debug or get_env_bool("AWS_RESERVATIONS_DEBUG")
    if debug:
        setup_debug_logging()

    try:
        audits = _run(access_key, secret_key, profile, list(regions), fmt, console)
    except KeyboardInterrupt:
        print_error(t("cli.cancelled"))
        sys.exit(130)
    except ARError as e:
        print_error(t("cli.error", message=format_error_for_user(e)))
        if is_access_denied(e):
            from plugins.reservations import REQUIRED_PERMISSIONS

            print_error(", ".join(REQUIRED_PERMISSIONS["read"]))
        logger.debug("감사 실패", exc_info=debug)
        sys.exit(1)

    from plugins.reservations import print_console, render_text, write_excel, write_json

    if fmt == "console":
        print_console(audits, console)
    elif fmt == "text":
        text = render_text(audits)
        if text:
            click.echo(text)
    else:
        path = Path(output) if output else default_output_path(fmt)
        if fmt == "json":
            saved = write_json(audits, path)
        else:
            saved = write_excel(audits, path, lang=get_lang())
        print_success(t("cli.report_saved", path=str(saved)))


def _run(access_key, secret_key, profile, regions, fmt, console):
    from core.auth import create_session, resolve_credentials
    from core.region import validate_regions
    from plugins.reservations import audit_regions

    credentials = resolve_credentials(access_key, secret_key, profile)
    region_list = validate_regions(regions or [get_default_region()])
    session = create_session(credentials, region=region_list[0])

    if fmt == "console":
        with console.status(t("cli.auditing", regions=", ".join(region_list))):
            return audit_regions(session, region_list)
    return audit_regions(session, region_list)


if __name__ == "__main__":
    cli()
