"""
core/devops/types.py - 명령 실행 타입 정의

주요 구성 요소:
- Operation: 네트워크 라이프사이클 작업 (bootstrap, query, cleanup)
- CommandInvocation: 프로세스 러너에 전달되는 작업 단위
- ShellResponse: 외부 프로세스의 원시 실행 결과
- CommandResult: 파싱된 구조화 출력 (그대로 전달)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# 외부 도구가 소유하는 스키마 - 이 레이어에서는 검증하지 않음
CommandResult = Any


class Operation(str, Enum):
    """네트워크 라이프사이클 작업"""

    BOOTSTRAP = "bootstrap"  # 네트워크 리소스 생성/구성
    QUERY = "query"  # 현재 상태 조회 (읽기 전용)
    CLEANUP = "cleanup"  # 네트워크 리소스 정리

    @property
    def is_read_only(self) -> bool:
        return self is Operation.QUERY


@dataclass(frozen=True)
class CommandInvocation:
    """프로세스 러너 호출 단위

    외부 도구는 위치 인자에 민감하므로 args의 순서는 계약의 일부입니다.

    Attributes:
        command_type: 명령 카테고리 (항상 "network")
        operation: 실행할 작업
        region: 호출자가 전달한 RegionRef
        args: 작업별 인자 (순서 유지)
        timeout: 러너에 그대로 전달되는 기한 (초, None이면 러너 기본값)
    """

    command_type: str
    operation: Operation
    region: Any
    args: tuple[str, ...] = ()
    timeout: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.command_type,
            "op": self.operation.value,
            "region": str(self.region),
            "args": list(self.args),
        }


@dataclass
class ShellResponse:
    """외부 프로세스 실행 결과

    Attributes:
        code: 종료 코드
        stdout: 구조화 데이터 채널 (UTF-8 JSON, 실제 프로세스에서는 원시 bytes)
        stderr: 진단 메시지 채널 (파싱하지 않음)
        command: 실제 실행된 명령줄
    """

    code: int
    stdout: bytes | str = ""
    stderr: str = ""
    command: list[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.code == 0
