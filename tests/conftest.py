"""
tests/conftest.py - pytest 공통 픽스처

프로세스 러너 모킹과 리전 레지스트리 헬퍼를 제공합니다.

Usage:
    def test_something(fake_runner, region_a):
        manager = NetworkManager(fake_runner)
        manager.query(region_a)
        assert fake_runner.invocations[0].args == ()
"""

import json
import sys
import threading
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Union

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from core.devops.types import CommandInvocation, ShellResponse  # noqa: E402
from core.region.registry import RegionRegistry  # noqa: E402
from core.region.types import RegionConfig  # noqa: E402

REGION_A = "0b0e8a0c-5f7e-4d59-9a49-5b1d4c2e7f10"
REGION_B = "7c1d2e3f-4a5b-4c6d-8e9f-0a1b2c3d4e5f"


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """CND_* 환경변수 격리"""
    for name in ("CND_CLOUD_SCRIPT", "CND_DEVOPS_HOME", "CND_REGIONS_FILE", "CND_COMMAND_TIMEOUT", "CND_LANG"):
        monkeypatch.delenv(name, raising=False)

    yield

    from cli.i18n import reset_lang

    reset_lang()


# =============================================================================
# 프로세스 러너 모킹
# =============================================================================


@dataclass
class FakeRunner:
    """테스트용 ProcessRunner

    response가 callable이면 invocation을 받아 ShellResponse를 반환하거나 예외를 발생시킵니다.
    """

    response: Any = None
    error: Optional[BaseException] = None
    invocations: List[CommandInvocation] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def __post_init__(self):
        if self.response is None:
            self.response = create_shell_response({"status": "ok"})

    def run(self, invocation: CommandInvocation) -> ShellResponse:
        with self._lock:
            self.invocations.append(invocation)
        if self.error is not None:
            raise self.error
        if callable(self.response):
            return self.response(invocation)
        return self.response

    @property
    def last(self) -> CommandInvocation:
        return self.invocations[-1]


@pytest.fixture
def fake_runner():
    """기본 성공 응답({"status": "ok"})을 반환하는 러너"""
    return FakeRunner()


@pytest.fixture
def region_a():
    return REGION_A


@pytest.fixture
def region_b():
    return REGION_B


# =============================================================================
# 리전 레지스트리 픽스처
# =============================================================================


@pytest.fixture
def region_configs():
    """테스트용 RegionConfig 목록"""
    return [
        RegionConfig(uuid=uuid.UUID(REGION_A), code="ap-northeast-2", provider_code="aws", name="Seoul"),
        RegionConfig(uuid=uuid.UUID(REGION_B), code="us-west1", provider_code="gcp"),
    ]


@pytest.fixture
def registry(region_configs):
    """검증기 없는 RegionRegistry"""
    reg = RegionRegistry()
    for config in region_configs:
        reg.register(config)
    return reg


@pytest.fixture
def regions_file(tmp_path, region_configs):
    """리전 레지스트리 JSON 파일"""
    path = tmp_path / "regions.json"
    path.write_text(json.dumps({"regions": [c.to_dict() for c in region_configs]}), encoding="utf-8")
    return path


# =============================================================================
# 유틸리티 함수
# =============================================================================


def create_shell_response(
    data: Any = None,
    code: int = 0,
    stdout: Optional[Union[str, bytes]] = None,
    stderr: str = "",
) -> ShellResponse:
    """ShellResponse 생성 헬퍼 (stdout 미지정 시 data를 JSON 직렬화)"""
    if stdout is None:
        stdout = json.dumps(data) if data is not None else ""
    return ShellResponse(code=code, stdout=stdout, stderr=stderr)


@pytest.fixture
def make_runner():
    """FakeRunner 팩토리 픽스처"""
    return FakeRunner


@pytest.fixture
def shell_response():
    """create_shell_response 헬퍼 픽스처"""
    return create_shell_response
