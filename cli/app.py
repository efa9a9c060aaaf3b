"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.
리전 단위 네트워크 라이프사이클 명령을 NetworkManager로 전달합니다.

명령어 구조:
    cnd --version                                     # 버전 표시
    cnd network bootstrap <REGION> [--host-vpc-id X]  # 네트워크 생성/구성
    cnd network query <REGION>                        # 상태 조회
    cnd network cleanup <REGION> [--yes]              # 리소스 정리
    cnd regions                                       # 등록된 리전 목록

공통 옵션:
    --regions-file: 리전 레지스트리 JSON (기본: CND_REGIONS_FILE)
    --timeout: 외부 도구 타임아웃 초 (기본: CND_COMMAND_TIMEOUT)
    -f, --format: 출력 형식 (json, console)

Usage:
    $ cnd network query 0b0e8a0c-5f7e-4d59-9a49-5b1d4c2e7f10 --regions-file regions.json
    $ python -m cli.app network cleanup <REGION> --yes
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import click
from click import Context

from cli.i18n import get_default_lang, get_lang, set_lang, t
from core.config import get_regions_file, get_version, log_config, settings
from core.devops import NetworkManager, Operation, SubprocessRunner
from core.exceptions import (
    CommandError,
    ConfigError,
    ExternalProcessFailure,
    InvalidParameter,
    InvalidRegion,
    MalformedOutput,
    format_error_for_user,
)
from core.region import KnownRegionChecker, RegionRegistry

# WARNING 레벨로 설정하여 INFO 로그가 명령 출력(JSON)에 섞이지 않도록 함
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format=log_config.FORMAT,
    datefmt=log_config.DATE_FORMAT,
)

VERSION = get_version()


def _build_help_text(lang: str | None = None) -> str:
    """help 텍스트 생성"""
    lines = [
        "CND - Cloud Network Dispatcher",
        "",
        t("cli.help_intro", lang=lang),
        "",
        "\b",  # Click 줄바꿈 유지 마커
        t("cli.help_basic_usage", lang=lang),
        f"  cnd network bootstrap <REGION>   {t('cli.help_bootstrap', lang=lang)}",
        f"  cnd network query <REGION>       {t('cli.help_query', lang=lang)}",
        f"  cnd network cleanup <REGION>     {t('cli.help_cleanup', lang=lang)}",
        f"  cnd regions                      {t('cli.help_regions', lang=lang)}",
        "",
        "\b",
        t("cli.help_examples", lang=lang),
        "  cnd network bootstrap <REGION> --host-vpc-id vpc-0abc --regions-file regions.json",
        "  cnd network query <REGION> -f console",
    ]
    return "\n".join(lines)


@click.group()
@click.version_option(VERSION, prog_name="cnd")
@click.option(
    "--lang",
    type=click.Choice(["ko", "en"]),
    default=None,
    help="UI 언어 설정 / UI language (ko: 한국어, en: English, 기본: CND_LANG)",
)
@click.option("-v", "--verbose", is_flag=True, help="디버그 로그 출력 (stderr)")
@click.pass_context
def cli(ctx: Context, lang: str | None, verbose: bool) -> None:
    """CND - Cloud Network Dispatcher"""
    set_lang(lang or get_default_lang())
    lang = get_lang()

    if verbose:
        from cli.ui.console import get_logger

        get_logger("core", logging.DEBUG)

    # 테스트나 임베딩 시 ctx.obj["manager"]로 NetworkManager 주입 가능
    ctx.ensure_object(dict)
    ctx.obj["lang"] = lang
    ctx.obj["verbose"] = verbose


cli.help = _build_help_text(get_default_lang())


# =============================================================================
# 공통 옵션 / 헬퍼
# =============================================================================


def _common_options(func):
    """network 하위 명령 공통 옵션"""
    func = click.option(
        "-f",
        "--format",
        "output_format",
        type=click.Choice(["json", "console"]),
        default="json",
        help="출력 형식",
    )(func)
    func = click.option("--timeout", type=click.FloatRange(min=0, min_open=True), default=None, help="타임아웃 (초)")(
        func
    )
    func = click.option(
        "--regions-file",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="리전 레지스트리 JSON 파일",
    )(func)
    return func


def _load_registry(regions_file: Path | None) -> RegionRegistry:
    path = regions_file or get_regions_file()
    if path is None:
        click.echo(t("cli.regions_file_required"), err=True)
        raise SystemExit(1)

    try:
        return RegionRegistry.from_file(path, checker=KnownRegionChecker())
    except ConfigError as e:
        click.echo(t("cli.regions_file_invalid", error=str(e)), err=True)
        raise SystemExit(1) from e


def _get_manager(ctx: Context, regions_file: Path | None) -> NetworkManager:
    manager = ctx.obj.get("manager") if ctx.obj else None
    if manager is not None:
        return manager
    return NetworkManager(SubprocessRunner(_load_registry(regions_file)))


def _describe_error(error: CommandError) -> str:
    """CommandError를 현재 언어의 사용자 메시지로 변환"""
    if isinstance(error, InvalidRegion):
        return t("network.invalid_region", region=error.region)
    if isinstance(error, InvalidParameter):
        return t("network.invalid_parameter", parameter=error.parameter, reason=error.reason)
    if isinstance(error, ExternalProcessFailure):
        message = t("network.process_failed", exit_code=error.exit_code if error.exit_code is not None else "-")
        detail = format_error_for_user(error.cause) if error.cause else error.stderr.strip()
        if detail:
            message = f"{message}\n{detail}"
        return message
    if isinstance(error, MalformedOutput):
        return t("network.malformed_output")
    return format_error_for_user(error)


def _execute(
    ctx: Context,
    operation: Operation,
    region: str,
    regions_file: Path | None,
    timeout: float | None,
    output_format: str,
    host_vpc_id: str | None = None,
) -> None:
    from cli.ui.console import print_error, print_result_tree, print_results_json, print_success

    manager = _get_manager(ctx, regions_file)

    try:
        result: Any = manager.run(operation, region, host_vpc_id=host_vpc_id, timeout=timeout)
    except CommandError as e:
        print_error(t("network.failed", operation=operation.value, message=_describe_error(e)))
        if ctx.obj.get("verbose"):
            print_results_json(e.to_dict(), stderr=True)
        raise SystemExit(1) from e

    if output_format == "console":
        print_result_tree(f"network.{operation.value} ({region})", result)
        print_success(t("network.completed", operation=operation.value, region=region))
    else:
        print_results_json(result)


# =============================================================================
# network 명령 그룹
# =============================================================================


@cli.group("network")
def network_group() -> None:
    """네트워크 라이프사이클 명령 (bootstrap / query / cleanup)"""


@network_group.command("bootstrap")
@click.argument("region")
@click.option("--host-vpc-id", default=None, help="연결할 기존 VPC ID (생략 시 새 VPC 할당)")
@_common_options
@click.pass_context
def bootstrap_command(
    ctx: Context,
    region: str,
    host_vpc_id: str | None,
    regions_file: Path | None,
    timeout: float | None,
    output_format: str,
) -> None:
    """리전 네트워크 생성/구성"""
    _execute(ctx, Operation.BOOTSTRAP, region, regions_file, timeout, output_format, host_vpc_id=host_vpc_id)


@network_group.command("query")
@click.argument("region")
@_common_options
@click.pass_context
def query_command(
    ctx: Context,
    region: str,
    regions_file: Path | None,
    timeout: float | None,
    output_format: str,
) -> None:
    """리전 네트워크 상태 조회"""
    _execute(ctx, Operation.QUERY, region, regions_file, timeout, output_format)


@network_group.command("cleanup")
@click.argument("region")
@click.option("-y", "--yes", is_flag=True, help="확인 없이 실행")
@_common_options
@click.pass_context
def cleanup_command(
    ctx: Context,
    region: str,
    yes: bool,
    regions_file: Path | None,
    timeout: float | None,
    output_format: str,
) -> None:
    """리전 네트워크 리소스 정리"""
    if not yes:
        click.confirm(t("network.cleanup_confirm", region=region), abort=True, err=True)
    _execute(ctx, Operation.CLEANUP, region, regions_file, timeout, output_format)


# =============================================================================
# regions 명령
# =============================================================================


@cli.command("regions")
@click.option(
    "--regions-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="리전 레지스트리 JSON 파일",
)
@click.option("--json", "as_json", is_flag=True, help="JSON 형식으로 출력")
def regions_command(regions_file: Path | None, as_json: bool) -> None:
    """등록된 리전 목록

    \b
    Examples:
        cnd regions --regions-file regions.json
        cnd regions --json
    """
    from cli.ui.console import print_info, print_results_json, print_table

    registry = _load_registry(regions_file)
    regions = registry.list_regions()

    if as_json:
        print_results_json([r.to_dict() for r in regions])
        return

    if not regions:
        print_info(t("cli.regions_empty"))
        return

    print_table(
        t("cli.regions_title"),
        [t("cli.col_uuid"), t("cli.col_provider"), t("cli.col_code"), t("cli.col_name")],
        [[str(r.uuid), r.provider_code, r.code, r.name or "-"] for r in regions],
    )


if __name__ == "__main__":
    cli()
