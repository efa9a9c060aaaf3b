"""
core/config.py - 중앙 설정 관리

애플리케이션 전체에서 사용되는 상수와 환경변수 기반 설정을 한 곳에서 관리합니다.

Usage:
    from core.config import settings, get_cloud_script, get_command_timeout

    script = get_cloud_script()        # "bin/ybcloud.sh" 또는 CND_CLOUD_SCRIPT
    timeout = get_command_timeout()    # 3600 또는 CND_COMMAND_TIMEOUT
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """불변 애플리케이션 설정"""

    # 외부 자동화 도구
    COMMAND_TYPE: str = "network"
    CLOUD_SCRIPT: str = "bin/ybcloud.sh"
    DEFAULT_COMMAND_TIMEOUT: int = 3600  # 1시간 - VPC 생성은 수 분 이상 걸릴 수 있음

    # 출력
    STDERR_TAIL_LINES: int = 20

    # 로깅
    LOG_LEVEL: str = "WARNING"


@dataclass(frozen=True)
class LogConfig:
    """로그 포맷 설정"""

    FORMAT: str = "%(asctime)s - %(levelname)s - %(message)s"
    DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"


settings = Settings()
log_config = LogConfig()


# =============================================================================
# 프로젝트 경로
# =============================================================================


def get_project_root() -> Path:
    """프로젝트 루트 경로 반환"""
    return Path(__file__).resolve().parent.parent


def get_version() -> str:
    """version.txt에서 버전 문자열 반환

    파일이 없으면 "0.0.0"을 반환합니다.
    """
    version_file = get_project_root() / "version.txt"
    try:
        return version_file.read_text(encoding="utf-8").strip() or "0.0.0"
    except OSError:
        return "0.0.0"


# =============================================================================
# 환경변수 헬퍼
# =============================================================================


def get_env_bool(name: str, default: bool = False) -> bool:
    """환경변수를 bool로 변환

    Args:
        name: 환경변수 이름
        default: 값이 없거나 해석할 수 없을 때 기본값

    Returns:
        변환된 bool 값
    """
    value = os.environ.get(name)
    if value is None:
        return default

    value = value.strip().lower()
    if value in ("true", "1", "yes", "on"):
        return True
    if value in ("false", "0", "no", "off"):
        return False
    return default


def get_env_int(name: str, default: int) -> int:
    """환경변수를 int로 변환 (실패 시 기본값)"""
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"환경변수 {name}의 값이 정수가 아닙니다: {value!r}")
        return default


def get_cloud_script() -> str:
    """자동화 스크립트 경로 (CND_CLOUD_SCRIPT > 기본값)"""
    return os.environ.get("CND_CLOUD_SCRIPT") or settings.CLOUD_SCRIPT


def get_devops_home() -> Path:
    """자동화 스크립트 실행 디렉터리 (CND_DEVOPS_HOME > 현재 디렉터리)"""
    home = os.environ.get("CND_DEVOPS_HOME")
    return Path(home) if home else Path.cwd()


def get_regions_file() -> Path | None:
    """리전 레지스트리 JSON 파일 경로 (CND_REGIONS_FILE)"""
    path = os.environ.get("CND_REGIONS_FILE")
    return Path(path) if path else None


def get_command_timeout() -> int:
    """명령 타임아웃 초 (CND_COMMAND_TIMEOUT > 기본값)"""
    timeout = get_env_int("CND_COMMAND_TIMEOUT", settings.DEFAULT_COMMAND_TIMEOUT)
    if timeout <= 0:
        return settings.DEFAULT_COMMAND_TIMEOUT
    return timeout
