"""
core/region/availability.py - AWS 리전 코드 확인

botocore에 내장된 엔드포인트 데이터를 사용하여 리전 코드가 실재하는지 확인합니다.
API 호출이나 자격 증명 없이 동작합니다.

Usage:
    from core.region.availability import KnownRegionChecker

    checker = KnownRegionChecker()
    if checker.is_known_region("ap-northeast-2"):
        print("서울 리전")

    unknown = checker.get_unknown_regions(["us-east-1", "xx-nowhere-1"])
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any

import boto3

logger = logging.getLogger(__name__)

# 리전 목록 조회 기준 서비스 - 네트워크 리소스는 모두 EC2 API 소관
DEFAULT_SERVICE = "ec2"


@dataclass
class KnownRegionChecker:
    """AWS 리전 코드 확인 클래스

    모든 파티션(aws, aws-cn, aws-us-gov 등)의 리전을 합쳐서 확인합니다.
    결과는 인스턴스 단위로 캐시됩니다 (엔드포인트 데이터는 프로세스 수명 동안 불변).

    Example:
        checker = KnownRegionChecker()
        checker.is_known_region("cn-north-1")  # True (aws-cn 파티션)
    """

    session: Any = None  # boto3.Session
    service: str = DEFAULT_SERVICE
    _cache: dict[str, frozenset[str]] = field(default_factory=dict)
    _lock: threading.RLock = field(default_factory=threading.RLock)

    def _get_session(self) -> Any:
        if self.session is None:
            self.session = boto3.session.Session()
        return self.session

    def get_known_regions(self) -> frozenset[str]:
        """모든 파티션의 리전 코드 집합

        Returns:
            리전 코드 frozenset
        """
        with self._lock:
            cached = self._cache.get(self.service)
            if cached is not None:
                return cached

            session = self._get_session()
            regions: set[str] = set()
            for partition in session.get_available_partitions():
                regions.update(session.get_available_regions(self.service, partition_name=partition))

            logger.debug(f"알려진 리전 {len(regions)}개 로드 (service={self.service})")
            known = frozenset(regions)
            self._cache[self.service] = known
            return known

    def is_known_region(self, region_name: str) -> bool:
        """리전 코드가 botocore 엔드포인트 데이터에 있는지 확인"""
        return region_name in self.get_known_regions()

    def get_unknown_regions(self, regions: list[str]) -> list[str]:
        """요청된 리전 중 알 수 없는 리전만 반환 (입력 순서 유지)"""
        known = self.get_known_regions()
        return [r for r in regions if r not in known]

    def clear_cache(self) -> None:
        """캐시 초기화"""
        with self._lock:
            self._cache.clear()
