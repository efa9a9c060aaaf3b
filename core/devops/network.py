"""
core/devops/network.py - 네트워크 명령 디스패처

리전 하나에 대한 네트워크 라이프사이클 요청을 프로세스 러너 호출 한 번으로 변환하고,
그 결과를 구조화된 값 또는 타입 예외로 변환합니다.

작업:
    bootstrap(region, host_vpc_id)  - VPC/서브넷/피어링 생성 또는 재구성
    query(region)                   - 현재 네트워크 상태 조회 (읽기 전용)
    cleanup(region)                 - 네트워크 리소스 정리

특징:
    - 상태 없음: 필드는 주입된 러너뿐이므로 리전이 다른 호출은 서로 독립적
    - 단일 시도: 재시도/백오프 없음
    - 결과는 외부 도구의 JSON 출력을 수정 없이 그대로 반환

Example:
    from core.devops import NetworkManager, SubprocessRunner
    from core.region import RegionRegistry

    manager = NetworkManager(SubprocessRunner(RegionRegistry.from_file("regions.json")))

    try:
        result = manager.bootstrap(region_uuid, host_vpc_id="vpc-123")
    except ExternalProcessFailure as e:
        print(e.exit_code, e.stderr)
"""

from __future__ import annotations

import logging
from typing import Any

from core.config import settings
from core.exceptions import (
    CommandError,
    ExternalProcessFailure,
    InvalidParameter,
    InvalidRegion,
    MalformedOutput,
    OutputParseError,
    ProcessRunnerError,
    RegionNotFoundError,
)
from core.region.types import normalize_region_ref

from .output import parse_command_output, tail_lines
from .runner import ProcessRunner
from .types import CommandInvocation, CommandResult, Operation

logger = logging.getLogger(__name__)

HOST_VPC_ID_FLAG = "--host_vpc_id"


class NetworkManager:
    """네트워크 명령 디스패처

    Args:
        runner: ProcessRunner 구현체
    """

    command_type = settings.COMMAND_TYPE

    def __init__(self, runner: ProcessRunner):
        self._runner = runner

    # =========================================================================
    # 공개 작업
    # =========================================================================

    def bootstrap(
        self,
        region: Any,
        host_vpc_id: str | None = None,
        *,
        timeout: float | None = None,
    ) -> CommandResult:
        """리전 네트워크 부트스트랩

        host_vpc_id가 공백뿐이면 값이 없는 것으로 처리하여 외부 도구가 새 VPC를 할당합니다.
        플랫폼 수준에서 멱등이 아니며 중복 제거는 외부 도구에 맡깁니다.
        """
        return self.run(Operation.BOOTSTRAP, region, host_vpc_id=host_vpc_id, timeout=timeout)

    def query(self, region: Any, *, timeout: float | None = None) -> CommandResult:
        """리전 네트워크 상태 조회 (읽기 전용, 동시 호출 안전)"""
        return self.run(Operation.QUERY, region, timeout=timeout)

    def cleanup(self, region: Any, *, timeout: float | None = None) -> CommandResult:
        """리전 네트워크 리소스 정리"""
        return self.run(Operation.CLEANUP, region, timeout=timeout)

    def run(
        self,
        operation: Operation | str,
        region: Any,
        host_vpc_id: str | None = None,
        timeout: float | None = None,
    ) -> CommandResult:
        """작업 실행 후 결과 변환

        Raises:
            InvalidRegion: 리전 참조가 잘못되었거나 해석되지 않음
            InvalidParameter: 파라미터 검증 실패
            ExternalProcessFailure: 비정상 종료, spawn 실패, 타임아웃, 러너의 기타 예외
            MalformedOutput: 정상 종료했지만 stdout이 UTF-8 JSON이 아님
        """
        invocation = self.build_invocation(operation, region, host_vpc_id=host_vpc_id, timeout=timeout)
        op = invocation.operation.value

        try:
            response = self._runner.run(invocation)
        except RegionNotFoundError as e:
            logger.warning(f"network.{op}: 리전을 찾을 수 없음 [{region}]")
            raise InvalidRegion(op, region, cause=e) from e
        except ProcessRunnerError as e:
            logger.error(f"network.{op} [{region}] 실행 실패: {e}")
            raise ExternalProcessFailure(op, region, cause=e) from e
        except CommandError:
            raise
        except Exception as e:
            # 러너 구현체의 예상치 못한 예외
            logger.error(f"network.{op} [{region}] 러너 예외: {type(e).__name__}: {e}")
            raise ExternalProcessFailure(op, region, cause=e) from e

        if not response.succeeded:
            stderr = tail_lines(response.stderr, settings.STDERR_TAIL_LINES)
            logger.error(f"network.{op} [{region}] 종료 코드 {response.code}: {stderr}")
            raise ExternalProcessFailure(op, region, exit_code=response.code, stderr=response.stderr)

        try:
            result = parse_command_output(response.stdout)
        except OutputParseError as e:
            logger.error(f"network.{op} [{region}] 출력 파싱 실패")
            raise MalformedOutput(op, region, cause=e) from e

        logger.info(f"network.{op} [{region}] 완료")
        return result

    # =========================================================================
    # 인자 조립
    # =========================================================================

    def build_invocation(
        self,
        operation: Operation | str,
        region: Any,
        host_vpc_id: str | None = None,
        timeout: float | None = None,
    ) -> CommandInvocation:
        """검증 후 CommandInvocation 구성 (외부 호출 없음)

        Raises:
            InvalidParameter: 알 수 없는 작업이거나 host_vpc_id가 잘못된 경우
            InvalidRegion: 리전 참조가 UUID로 해석되지 않는 경우
        """
        op = _to_operation(operation, region)

        try:
            normalize_region_ref(region)
        except (TypeError, ValueError) as e:
            logger.warning(f"network.{op.value}: 잘못된 리전 참조 {region!r}")
            raise InvalidRegion(op.value, region, cause=e) from e

        if op is Operation.BOOTSTRAP:
            args = bootstrap_args(host_vpc_id, region)
        else:
            args = ()

        return CommandInvocation(
            command_type=self.command_type,
            operation=op,
            region=region,
            args=args,
            timeout=timeout,
        )


def _to_operation(operation: Operation | str, region: Any) -> Operation:
    if isinstance(operation, Operation):
        return operation
    try:
        return Operation(str(operation).strip().lower())
    except ValueError as e:
        raise InvalidParameter(str(operation), region, "operation", "지원하지 않는 작업", cause=e) from e


def bootstrap_args(host_vpc_id: Any, region: Any = None) -> tuple[str, ...]:
    """bootstrap 인자 조립

    공백을 제거한 값이 비어 있지 않을 때만 ("--host_vpc_id", 값)을 추가합니다.

    Raises:
        InvalidParameter: 문자열이 아닌 값
    """
    if host_vpc_id is None:
        return ()
    if not isinstance(host_vpc_id, str):
        raise InvalidParameter(Operation.BOOTSTRAP.value, region, "host_vpc_id", "문자열이어야 합니다")

    value = host_vpc_id.strip()
    if not value:
        return ()

    return (HOST_VPC_ID_FLAG, value)
