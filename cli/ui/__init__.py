# cli/ui - 콘솔 컴포넌트 (rich)
"""
콘솔 출력 모듈

CLI 전용 출력 헬퍼와 Rich 로거 설정
"""

from .console import (
    SYMBOL_ERROR,
    SYMBOL_SUCCESS,
    console,
    get_console,
    get_logger,
    print_error,
    print_success,
    setup_debug_logging,
)

__all__ = [
    "SYMBOL_ERROR",
    "SYMBOL_SUCCESS",
    "console",
    "get_console",
    "get_logger",
    "print_error",
    "print_success",
    "setup_debug_logging",
]
