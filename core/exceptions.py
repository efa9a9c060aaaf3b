"""
core/exceptions.py - 통합 예외 계층 구조

네트워크 명령 디스패처 전체에서 사용되는 예외 클래스들을 정의합니다.
모든 실패는 작업(operation), 리전, 원인(cause)을 담은 타입 예외로 전달됩니다.

예외 계층 구조:
    CNDError (베이스)
    ├── ConfigError (설정 관련)
    ├── ValidationError (입력 검증)
    ├── RegionNotFoundError (리전 조회 실패)
    ├── ProcessRunnerError (프로세스 실행 실패 - 러너 내부)
    ├── OutputParseError (출력 파싱 실패 - 파서 내부)
    └── CommandError (명령 실행 결과 - 호출자에게 노출)
        ├── InvalidRegion
        ├── InvalidParameter
        ├── ExternalProcessFailure
        └── MalformedOutput

Usage:
    from core.exceptions import CommandError, ExternalProcessFailure

    try:
        result = manager.bootstrap(region_uuid, "vpc-123")
    except ExternalProcessFailure as e:
        logger.error(e.to_dict())
"""

from __future__ import annotations

from typing import Any

# =============================================================================
# 베이스 예외
# =============================================================================


class CNDError(Exception):
    """Cloud Network Dispatcher 기본 예외 클래스

    모든 커스텀 예외의 베이스 클래스입니다.

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# 설정 / 검증 관련 예외
# =============================================================================


class ConfigError(CNDError):
    """설정 관련 예외"""

    def __init__(
        self,
        key: str,
        message: str,
        cause: BaseException | None = None,
    ):
        full_message = f"설정 오류 [{key}]: {message}"
        super().__init__(full_message, cause)
        self.config_key = key
        self.details["config_key"] = key


class ValidationError(CNDError):
    """입력 검증 오류"""

    def __init__(
        self,
        field: str,
        value: Any,
        expected: str,
        cause: BaseException | None = None,
    ):
        message = f"검증 오류 [{field}]: 예상값 '{expected}', 실제값 '{value}'"
        super().__init__(message, cause)
        self.field = field
        self.value = value
        self.expected = expected
        self.details.update(
            {
                "field": field,
                "value": str(value),
                "expected": expected,
            }
        )


class RegionNotFoundError(CNDError):
    """RegionRef를 리전 설정으로 해석할 수 없는 경우"""

    def __init__(self, region: Any, cause: BaseException | None = None):
        super().__init__(f"리전을 찾을 수 없습니다 [{region}]", cause)
        self.region = region
        self.details["region"] = str(region)


# =============================================================================
# 프로세스 러너 / 파서 내부 예외
# =============================================================================


class ProcessRunnerError(CNDError):
    """외부 자동화 프로세스를 실행하지 못한 경우

    spawn 실패, 타임아웃, I/O 오류를 나타냅니다.
    비정상 종료 코드는 ShellResponse.code로 전달되며 이 예외를 사용하지 않습니다.
    """

    def __init__(
        self,
        command: list[str] | tuple[str, ...],
        reason: str,
        cause: BaseException | None = None,
    ):
        super().__init__(f"프로세스 실행 실패 ({reason})", cause)
        self.command = list(command)
        self.reason = reason
        self.details.update({"command": " ".join(self.command), "reason": reason})


class OutputParseError(CNDError):
    """표준 출력을 구조화된 데이터로 파싱하지 못한 경우"""

    def __init__(self, output: str, cause: BaseException | None = None):
        super().__init__("구조화된 출력 파싱 실패", cause)
        self.output = output
        self.details["output_preview"] = output[:200]


# =============================================================================
# 명령 실행 예외 (호출자에게 노출)
# =============================================================================


class CommandError(CNDError):
    """네트워크 명령 실패 베이스

    로깅과 후속 처리에 필요한 작업명, 리전, 원인을 항상 포함합니다.
    """

    def __init__(
        self,
        operation: str,
        region: Any,
        message: str,
        cause: BaseException | None = None,
        details: dict[str, Any] | None = None,
    ):
        full_message = f"network.{operation} 실패 [{region}]: {message}"
        super().__init__(full_message, cause, details)
        self.operation = operation
        self.region = region
        self.details.update({"operation": operation, "region": str(region)})


class InvalidRegion(CommandError):
    """리전 참조가 유효하지 않거나 해석되지 않음 (호출 전 감지)"""

    def __init__(self, operation: str, region: Any, cause: BaseException | None = None):
        super().__init__(operation, region, "유효하지 않은 리전", cause)


class InvalidParameter(CommandError):
    """호출자가 전달한 파라미터가 검증에 실패함"""

    def __init__(
        self,
        operation: str,
        region: Any,
        parameter: str,
        reason: str,
        cause: BaseException | None = None,
    ):
        super().__init__(operation, region, f"잘못된 파라미터 '{parameter}' ({reason})", cause)
        self.parameter = parameter
        self.reason = reason
        self.details["parameter"] = parameter


class ExternalProcessFailure(CommandError):
    """외부 자동화 프로세스가 비정상 종료했거나 실행되지 못함"""

    def __init__(
        self,
        operation: str,
        region: Any,
        exit_code: int | None = None,
        stderr: str = "",
        cause: BaseException | None = None,
    ):
        if exit_code is not None:
            message = f"외부 프로세스 종료 코드 {exit_code}"
        else:
            message = "외부 프로세스 실행 실패"
        super().__init__(operation, region, message, cause)
        self.exit_code = exit_code
        self.stderr = stderr
        self.details.update({"exit_code": exit_code, "stderr": stderr[-2000:]})


class MalformedOutput(CommandError):
    """프로세스는 정상 종료했지만 출력을 파싱할 수 없음"""

    def __init__(self, operation: str, region: Any, cause: BaseException | None = None):
        super().__init__(operation, region, "출력 형식 오류", cause)


# =============================================================================
# 예외 유틸리티 함수
# =============================================================================


def is_process_failure(error: BaseException) -> bool:
    """외부 프로세스 실패(종료 코드, spawn, 타임아웃)인지 확인

    Args:
        error: 확인할 예외

    Returns:
        프로세스 실패이면 True
    """
    return isinstance(error, (ExternalProcessFailure, ProcessRunnerError))


def format_error_for_user(error: BaseException) -> str:
    """사용자에게 표시할 에러 메시지 포맷팅

    Args:
        error: 예외

    Returns:
        사용자 친화적인 에러 메시지
    """
    if isinstance(error, ExternalProcessFailure) and error.stderr.strip():
        # stderr 마지막 줄이 보통 가장 구체적인 원인
        last_line = error.stderr.strip().splitlines()[-1]
        return f"{error.message}: {last_line}"

    if isinstance(error, CNDError):
        return str(error)

    return f"{type(error).__name__}: {error}"
