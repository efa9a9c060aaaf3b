"""
core/region/registry.py - 리전 레지스트리

RegionRef(UUID)를 리전 코드와 프로바이더 코드로 해석합니다.
플랫폼이 관리하는 리전 목록을 JSON 파일에서 로드하거나 직접 등록할 수 있습니다.

파일 형식:
    {
        "regions": [
            {"uuid": "...", "code": "ap-northeast-2", "provider": "aws", "name": "Seoul"},
            {"uuid": "...", "code": "us-west1", "provider": "gcp"}
        ]
    }

Usage:
    from core.region import RegionRegistry

    registry = RegionRegistry.from_file("regions.json")
    config = registry.resolve("0b0e8a0c-...")
    print(config.provider_code, config.code)
"""

from __future__ import annotations

import json
import logging
import threading
import uuid
from pathlib import Path
from typing import Any

from core.exceptions import ConfigError, RegionNotFoundError

from .availability import KnownRegionChecker
from .types import RegionConfig, normalize_region_ref

logger = logging.getLogger(__name__)


class RegionRegistry:
    """스레드 세이프 리전 레지스트리

    checker가 주어지면 aws 프로바이더 리전의 코드를 등록 시점에 검증합니다.
    """

    def __init__(self, checker: KnownRegionChecker | None = None):
        self._regions: dict[uuid.UUID, RegionConfig] = {}
        self._lock = threading.Lock()
        self._checker = checker

    def __len__(self) -> int:
        with self._lock:
            return len(self._regions)

    def register(self, config: RegionConfig) -> None:
        """리전 설정 등록 (같은 UUID는 덮어씀)

        Raises:
            ConfigError: 리전 코드가 비어 있거나 aws 리전 코드가 알려지지 않은 경우
        """
        if not config.code:
            raise ConfigError(f"regions.{config.uuid}", "리전 코드가 비어 있습니다")
        if not config.provider_code:
            raise ConfigError(f"regions.{config.uuid}", "프로바이더 코드가 비어 있습니다")
        if (
            self._checker is not None
            and config.provider_code == "aws"
            and not self._checker.is_known_region(config.code)
        ):
            raise ConfigError(f"regions.{config.uuid}", f"알 수 없는 AWS 리전 코드: {config.code}")

        with self._lock:
            self._regions[config.uuid] = config

    def get(self, region: Any) -> RegionConfig | None:
        """리전 설정 조회 (없거나 해석 불가하면 None)"""
        try:
            key = normalize_region_ref(region)
        except (TypeError, ValueError):
            return None
        with self._lock:
            return self._regions.get(key)

    def resolve(self, region: Any) -> RegionConfig:
        """리전 설정 조회

        Raises:
            RegionNotFoundError: 등록되지 않았거나 UUID로 해석할 수 없는 경우
        """
        try:
            key = normalize_region_ref(region)
        except (TypeError, ValueError) as e:
            raise RegionNotFoundError(region, cause=e) from e

        with self._lock:
            config = self._regions.get(key)
        if config is None:
            raise RegionNotFoundError(region)
        return config

    def list_regions(self) -> list[RegionConfig]:
        """등록된 리전 목록 (프로바이더, 코드 순)"""
        with self._lock:
            return sorted(self._regions.values(), key=lambda c: (c.provider_code, c.code))

    # =========================================================================
    # 로드
    # =========================================================================

    @classmethod
    def from_dict(cls, data: dict[str, Any], checker: KnownRegionChecker | None = None) -> RegionRegistry:
        """딕셔너리 문서에서 레지스트리 생성

        Raises:
            ConfigError: 문서 구조가 잘못된 경우
        """
        entries = data.get("regions") if isinstance(data, dict) else None
        if not isinstance(entries, list):
            raise ConfigError("regions", "'regions' 목록이 없습니다")

        registry = cls(checker=checker)
        for index, entry in enumerate(entries):
            try:
                config = RegionConfig.from_dict(entry)
            except (KeyError, TypeError, ValueError) as e:
                raise ConfigError(f"regions[{index}]", "리전 항목 형식 오류", cause=e) from e
            registry.register(config)

        logger.debug(f"리전 {len(registry)}개 로드")
        return registry

    @classmethod
    def from_file(cls, path: str | Path, checker: KnownRegionChecker | None = None) -> RegionRegistry:
        """JSON 파일에서 레지스트리 생성

        Raises:
            ConfigError: 파일을 읽을 수 없거나 JSON 형식이 잘못된 경우
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigError(str(path), "리전 파일을 읽을 수 없습니다", cause=e) from e
        except json.JSONDecodeError as e:
            raise ConfigError(str(path), "리전 파일 JSON 형식 오류", cause=e) from e

        return cls.from_dict(data, checker=checker)
