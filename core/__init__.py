# core/__init__.py
"""
core - 클라우드 네트워크 라이프사이클 디스패처

리전 단위 네트워크 리소스(VPC, 서브넷, 피어링)의 bootstrap / query / cleanup 명령을
외부 자동화 도구로 전달하고 결과를 해석하는 최상위 패키지입니다.

아키텍처:
    core/
    ├── devops/         # 명령 조립, 프로세스 러너, 출력 파싱, NetworkManager
    ├── region/         # RegionRef 해석 (레지스트리, AWS 리전 코드 확인)
    ├── config.py       # 중앙 설정 관리
    └── exceptions.py   # 통합 예외 계층

Usage:
    from core.devops import NetworkManager, SubprocessRunner
    from core.region import RegionRegistry
    from core.exceptions import CommandError

    manager = NetworkManager(SubprocessRunner(RegionRegistry.from_file("regions.json")))
    try:
        state = manager.query("0b0e8a0c-5f7e-4d59-9a49-5b1d4c2e7f10")
    except CommandError as e:
        print(e.to_dict())
"""

from core import config, devops, exceptions, region

__all__: list[str] = [
    # 서브패키지
    "devops",
    "region",
    # 모듈
    "config",
    "exceptions",
]
