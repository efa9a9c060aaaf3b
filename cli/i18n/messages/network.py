"""
cli/i18n/messages/network.py - Network Command Messages

Contains translations for network lifecycle results and failures.
"""

from __future__ import annotations

NETWORK_MESSAGES = {
    "completed": {
        "ko": "network.{operation} 완료 ({region})",
        "en": "network.{operation} completed ({region})",
    },
    "failed": {
        "ko": "network.{operation} 실패: {message}",
        "en": "network.{operation} failed: {message}",
    },
    "invalid_region": {
        "ko": "유효하지 않은 리전입니다: {region}",
        "en": "Invalid region: {region}",
    },
    "invalid_parameter": {
        "ko": "잘못된 파라미터 '{parameter}': {reason}",
        "en": "Invalid parameter '{parameter}': {reason}",
    },
    "process_failed": {
        "ko": "자동화 도구 실행 실패 (종료 코드: {exit_code})",
        "en": "Automation tool failed (exit code: {exit_code})",
    },
    "malformed_output": {
        "ko": "자동화 도구 출력이 JSON 형식이 아닙니다",
        "en": "Automation tool output is not valid JSON",
    },
    "cleanup_confirm": {
        "ko": "{region} 리전의 네트워크 리소스를 정리하시겠습니까?",
        "en": "Tear down network resources for region {region}?",
    },
}
