"""
core/devops/output.py - 외부 도구 출력 파싱

채널 분리 규칙:
    - stdout: UTF-8로 인코딩된 구조화 데이터(JSON)만 허용
    - stderr: 진단 메시지 전용, 파싱하지 않음

stdout에 JSON 이외의 텍스트가 섞여 있거나 UTF-8이 아니면 MalformedOutput으로 처리됩니다.
"""

from __future__ import annotations

import json

from core.exceptions import OutputParseError

from .types import CommandResult

STDOUT_ENCODING = "utf-8"


def decode_stream(data: bytes | str | None, errors: str = "strict") -> str:
    """프로세스 출력 바이트를 문자열로 변환

    Raises:
        UnicodeDecodeError: errors="strict"이고 UTF-8이 아닌 경우
    """
    if data is None:
        return ""
    if isinstance(data, str):
        return data
    return data.decode(STDOUT_ENCODING, errors=errors)


def parse_command_output(stdout: bytes | str | None) -> CommandResult:
    """stdout을 JSON으로 파싱

    Args:
        stdout: 외부 프로세스의 표준 출력 (bytes 또는 str)

    Returns:
        파싱된 값 (dict, list, 스칼라, None)

    Raises:
        OutputParseError: 비어 있거나, UTF-8이 아니거나, JSON이 아니거나, 중첩이 너무 깊은 경우
    """
    try:
        text = decode_stream(stdout).strip()
    except UnicodeDecodeError as e:
        raise OutputParseError(decode_stream(stdout, errors="replace"), cause=e) from e

    if not text:
        raise OutputParseError(text)

    try:
        return json.loads(text)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError는 ValueError의 하위 클래스
        raise OutputParseError(text, cause=e) from e


def tail_lines(text: str, count: int) -> str:
    """마지막 count 줄만 반환 (에러 메시지용)"""
    lines = (text or "").rstrip().splitlines()
    return "\n".join(lines[-count:])
