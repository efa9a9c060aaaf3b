# core/region - 리전 참조 해석
"""
리전 모듈

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다 (boto3 로드는 실제 사용 시점까지 지연).
"""

__all__ = [
    "RegionRef",
    "RegionConfig",
    "RegionRegistry",
    "KnownRegionChecker",
    "normalize_region_ref",
]


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name in ("RegionRef", "RegionConfig", "normalize_region_ref"):
        from . import types

        return getattr(types, name)
    if name == "RegionRegistry":
        from .registry import RegionRegistry

        return RegionRegistry
    if name == "KnownRegionChecker":
        from .availability import KnownRegionChecker

        return KnownRegionChecker

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
