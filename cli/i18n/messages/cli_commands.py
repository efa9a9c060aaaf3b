"""
cli/i18n/messages/cli_commands.py - CLI Command Messages

Contains translations for Click CLI help text and option errors.
"""

from __future__ import annotations

CLI_MESSAGES = {
    # =========================================================================
    # CLI Help Text
    # =========================================================================
    "help_intro": {
        "ko": "리전 단위 클라우드 네트워크(VPC, 서브넷, 피어링)의\n생성/조회/정리 명령을 자동화 도구로 전달하는 CLI 도구입니다.",
        "en": "A CLI that dispatches bootstrap, query and cleanup commands\nfor per-region cloud networks (VPCs, subnets, peering).",
    },
    "help_basic_usage": {
        "ko": "[기본 사용법]",
        "en": "[Basic Usage]",
    },
    "help_bootstrap": {
        "ko": "네트워크 생성/구성",
        "en": "Provision or configure the network",
    },
    "help_query": {
        "ko": "네트워크 상태 조회",
        "en": "Inspect the current network state",
    },
    "help_cleanup": {
        "ko": "네트워크 리소스 정리",
        "en": "Tear down network resources",
    },
    "help_regions": {
        "ko": "등록된 리전 목록",
        "en": "List registered regions",
    },
    "help_examples": {
        "ko": "[예시]",
        "en": "[Examples]",
    },
    # =========================================================================
    # Options / Setup Errors
    # =========================================================================
    "regions_file_required": {
        "ko": "오류: --regions-file 옵션 또는 CND_REGIONS_FILE 환경변수를 지정하세요.",
        "en": "Error: specify --regions-file or set CND_REGIONS_FILE.",
    },
    "regions_file_invalid": {
        "ko": "리전 파일 로드 실패: {error}",
        "en": "Failed to load regions file: {error}",
    },
    # =========================================================================
    # Region List
    # =========================================================================
    "regions_title": {
        "ko": "등록된 리전",
        "en": "Registered Regions",
    },
    "regions_empty": {
        "ko": "등록된 리전이 없습니다.",
        "en": "No regions registered.",
    },
    "col_uuid": {
        "ko": "UUID",
        "en": "UUID",
    },
    "col_provider": {
        "ko": "프로바이더",
        "en": "Provider",
    },
    "col_code": {
        "ko": "리전 코드",
        "en": "Region Code",
    },
    "col_name": {
        "ko": "이름",
        "en": "Name",
    },
}
