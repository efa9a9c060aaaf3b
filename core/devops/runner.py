"""
core/devops/runner.py - 외부 자동화 프로세스 러너

리전 단위 자동화 스크립트를 동기 실행하고 원시 결과(ShellResponse)를 반환합니다.
결과 해석(종료 코드, JSON 파싱)은 디스패처가 담당합니다.

명령줄 구성 (위치 인자 순서가 계약):
    <script> <provider_code> --region <region_code> <command_type> <operation> [args...]

    예: bin/ybcloud.sh aws --region ap-northeast-2 network bootstrap --host_vpc_id vpc-123

Usage:
    from core.devops.runner import SubprocessRunner
    from core.region import RegionRegistry

    runner = SubprocessRunner(RegionRegistry.from_file("regions.json"))
    response = runner.run(invocation)
"""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from core.config import get_cloud_script, get_command_timeout, get_devops_home
from core.exceptions import ProcessRunnerError

from .output import decode_stream
from .types import CommandInvocation, ShellResponse

if TYPE_CHECKING:
    from core.region.registry import RegionRegistry
    from core.region.types import RegionConfig

logger = logging.getLogger(__name__)


class ProcessRunner(Protocol):
    """프로세스 러너 Protocol

    구현체는 다음을 보장해야 합니다:
    - 리전을 해석할 수 없으면 RegionNotFoundError
    - spawn 실패, 타임아웃, I/O 오류는 ProcessRunnerError
    - 프로세스가 끝까지 실행되면 종료 코드와 무관하게 ShellResponse 반환

    디스패처는 그 밖의 예외도 ExternalProcessFailure로 변환합니다.
    """

    def run(self, invocation: CommandInvocation) -> ShellResponse:
        """invocation을 실행하고 원시 결과 반환"""
        ...


class SubprocessRunner:
    """subprocess 기반 기본 프로세스 러너

    Args:
        registry: RegionRef 해석용 리전 레지스트리
        script: 자동화 스크립트 경로 (기본: CND_CLOUD_SCRIPT 또는 설정값)
        cwd: 실행 디렉터리 (기본: CND_DEVOPS_HOME 또는 현재 디렉터리)
        timeout: 기본 타임아웃 초 (invocation.timeout이 우선)
        extra_env: 프로세스에 추가할 환경변수
    """

    def __init__(
        self,
        registry: RegionRegistry,
        script: str | None = None,
        cwd: str | Path | None = None,
        timeout: float | None = None,
        extra_env: dict[str, str] | None = None,
    ):
        self.registry = registry
        self.script = script or get_cloud_script()
        self.cwd = Path(cwd) if cwd else get_devops_home()
        self.timeout = timeout if timeout is not None else get_command_timeout()
        self.extra_env = dict(extra_env or {})

    def build_command(self, invocation: CommandInvocation, region: RegionConfig) -> list[str]:
        """자동화 도구 명령줄 구성"""
        return [
            self.script,
            region.provider_code,
            "--region",
            region.code,
            invocation.command_type,
            invocation.operation.value,
            *invocation.args,
        ]

    def _build_env(self) -> dict[str, str] | None:
        if not self.extra_env:
            return None
        env = os.environ.copy()
        env.update(self.extra_env)
        return env

    def run(self, invocation: CommandInvocation) -> ShellResponse:
        """자동화 스크립트 실행

        Raises:
            RegionNotFoundError: 레지스트리에 없는 리전
            ProcessRunnerError: 실행 불가, 타임아웃, I/O 오류
        """
        region = self.registry.resolve(invocation.region)
        command = self.build_command(invocation, region)
        timeout = invocation.timeout if invocation.timeout is not None else self.timeout

        logger.debug(f"실행: {' '.join(command)} (cwd={self.cwd}, timeout={timeout})")

        try:
            completed = subprocess.run(  # noqa: S603
                command,
                cwd=self.cwd,
                env=self._build_env(),
                capture_output=True,
                timeout=timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise ProcessRunnerError(command, f"{timeout}초 타임아웃", cause=e) from e
        except OSError as e:
            raise ProcessRunnerError(command, "프로세스를 시작할 수 없습니다", cause=e) from e

        # stdout은 bytes 그대로 (디코딩은 parse_command_output), stderr은 replace 디코딩
        stderr = decode_stream(completed.stderr, errors="replace")
        for line in stderr.splitlines():
            logger.debug(f"[{region.code}] {line}")

        return ShellResponse(
            code=completed.returncode,
            stdout=completed.stdout or b"",
            stderr=stderr,
            command=command,
        )
