"""
cli/ui/console.py - Rich 콘솔 유틸리티

일관된 콘솔 출력과 로깅을 위한 함수들
"""

from __future__ import annotations

import json
import logging
import platform
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from core.config import log_config

# botocore 노이즈 로그 제한
logging.getLogger("botocore.loaders").setLevel(logging.WARNING)
logging.getLogger("botocore.session").setLevel(logging.WARNING)


def get_console(stderr: bool = False) -> Console:
    """Rich Console 인스턴스를 생성하고 반환합니다."""
    is_windows = platform.system().lower() == "windows"

    return Console(
        stderr=stderr,
        color_system="auto",
        highlight=True,
        soft_wrap=True,
        markup=True,
        emoji=not is_windows,
    )


# 전역 콘솔 인스턴스
console = get_console()
err_console = get_console(stderr=True)


def get_logger(name: str = "core", level: int = logging.INFO) -> logging.Logger:
    """Rich 핸들러가 설정된 logger를 반환합니다.

    Args:
        name: logger 이름 (기본값: "core" - 디스패처 전체)
        level: 로그 레벨

    Returns:
        logging.Logger: 설정된 logger 인스턴스
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # 이미 핸들러가 설정되어 있으면 레벨만 갱신
    if any(isinstance(h, RichHandler) for h in logger.handlers):
        return logger

    handler = RichHandler(console=err_console, rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt=log_config.DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    return logger


# =============================================================================
# 표준 출력 스타일
# =============================================================================

SYMBOL_SUCCESS = "✓"
SYMBOL_ERROR = "✗"
SYMBOL_WARNING = "!"
SYMBOL_INFO = "•"


def print_success(message: str) -> None:
    """성공 메시지 출력 (초록색 체크마크)"""
    console.print(f"[green]{SYMBOL_SUCCESS} {escape(message)}[/green]")


def print_error(message: str) -> None:
    """에러 메시지 출력 (stderr, 빨간색 X)"""
    err_console.print(f"[red]{SYMBOL_ERROR} {escape(message)}[/red]", markup=True, highlight=False)


def print_warning(message: str) -> None:
    """경고 메시지 출력 (stderr, 노란색)"""
    err_console.print(f"[yellow]{SYMBOL_WARNING} {escape(message)}[/yellow]")


def print_info(message: str) -> None:
    """정보 메시지 출력 (파란색 정보)"""
    console.print(f"[blue]{SYMBOL_INFO} {escape(message)}[/blue]")


def print_table(
    title: str,
    columns: list[str],
    rows: list[list],
) -> None:
    """테이블 형식으로 데이터를 출력합니다.

    Args:
        title: 테이블 제목
        columns: 컬럼 헤더 리스트
        rows: 행 데이터 리스트
    """
    table = Table(title=title, show_header=True, header_style="bold magenta")

    for column in columns:
        table.add_column(column)

    for row in rows:
        table.add_row(*[escape(str(cell)) for cell in row])

    console.print(table)


def _add_branch(tree: Tree, value: Any) -> None:
    if isinstance(value, dict):
        for key, child in value.items():
            if isinstance(child, (dict, list)):
                _add_branch(tree.add(f"[cyan]{escape(str(key))}[/cyan]"), child)
            else:
                tree.add(f"[cyan]{escape(str(key))}[/cyan]: {escape(str(child))}")
    elif isinstance(value, list):
        for index, child in enumerate(value):
            if isinstance(child, (dict, list)):
                _add_branch(tree.add(f"[dim]\\[{index}][/dim]"), child)
            else:
                tree.add(f"[dim]\\[{index}][/dim] {escape(str(child))}")
    else:
        tree.add(escape(str(value)))


def print_result_tree(title: str, result: Any) -> None:
    """구조화된 명령 결과를 계층 트리로 출력

    Args:
        title: 트리 루트 제목
        result: JSON 값 (dict, list, 스칼라)

    Example:
        print_result_tree("network.query", {"us-west-2": {"vpc_id": "vpc-123"}})
    """
    tree = Tree(f"[bold]{escape(title)}[/bold]")
    _add_branch(tree, result)
    console.print(tree)


def print_results_json(data: Any, pretty: bool = True, stderr: bool = False) -> None:
    """JSON 형식으로 결과 출력 (마크업/하이라이트 없이)

    Args:
        data: JSON 직렬화 가능한 값
        pretty: 들여쓰기 여부
        stderr: True면 err_console로 출력 (에러 상세 등 결과가 아닌 데이터)
    """
    text = json.dumps(data, ensure_ascii=False, indent=2 if pretty else None, default=str)
    target = err_console if stderr else console
    target.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)
