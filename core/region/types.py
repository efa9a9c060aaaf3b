"""
core/region/types.py - 리전 참조 및 설정 타입
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any, Union

# 호출자가 전달하는 리전 참조 (UUID 또는 UUID 문자열)
RegionRef = Union[uuid.UUID, str]


def normalize_region_ref(region: Any) -> uuid.UUID:
    """RegionRef를 uuid.UUID로 정규화

    Args:
        region: uuid.UUID 또는 UUID 문자열

    Returns:
        uuid.UUID

    Raises:
        ValueError: UUID로 해석할 수 없는 경우
        TypeError: 지원하지 않는 타입인 경우
    """
    if isinstance(region, uuid.UUID):
        return region
    if isinstance(region, str):
        return uuid.UUID(region.strip())
    raise TypeError(f"RegionRef는 UUID 또는 문자열이어야 합니다: {type(region).__name__}")


@dataclass(frozen=True)
class RegionConfig:
    """RegionRef가 가리키는 리전 설정

    Attributes:
        uuid: 리전 UUID
        code: 클라우드 리전 코드 (예: "ap-northeast-2")
        provider_code: 프로바이더 코드 (예: "aws", "gcp", "azu", "onprem")
        name: 표시용 이름 (선택)
    """

    uuid: uuid.UUID
    code: str
    provider_code: str
    name: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RegionConfig:
        """JSON 딕셔너리에서 생성 (uuid, code, provider 필수)"""
        return cls(
            uuid=normalize_region_ref(data["uuid"]),
            code=str(data["code"]).strip(),
            provider_code=str(data["provider"]).strip().lower(),
            name=str(data.get("name", "")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "uuid": str(self.uuid),
            "code": self.code,
            "provider": self.provider_code,
            "name": self.name,
        }
