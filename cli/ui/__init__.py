# cli/ui - 콘솔 출력 컴포넌트 (rich)
"""
콘솔 출력 모듈

CLI 전용 UI 컴포넌트들 (결과 트리, 테이블, 메시지 출력, Rich 로깅)
"""

from .console import (
    SYMBOL_ERROR,
    SYMBOL_INFO,
    SYMBOL_SUCCESS,
    SYMBOL_WARNING,
    console,
    err_console,
    get_console,
    get_logger,
    print_error,
    print_info,
    print_result_tree,
    print_results_json,
    print_success,
    print_table,
    print_warning,
)

__all__ = [
    "SYMBOL_ERROR",
    "SYMBOL_INFO",
    "SYMBOL_SUCCESS",
    "SYMBOL_WARNING",
    "console",
    "err_console",
    "get_console",
    "get_logger",
    "print_error",
    "print_info",
    "print_result_tree",
    "print_results_json",
    "print_success",
    "print_table",
    "print_warning",
]
