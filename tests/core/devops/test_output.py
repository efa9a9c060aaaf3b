"""
tests/core/devops/test_output.py - 출력 파싱 테스트
"""

import pytest

from core.devops.output import decode_stream, parse_command_output, tail_lines
from core.exceptions import OutputParseError


class TestParseCommandOutput:
    """parse_command_output 테스트"""

    def test_object(self):
        assert parse_command_output('{"us-west-2": {"vpc_id": "vpc-1"}}') == {"us-west-2": {"vpc_id": "vpc-1"}}

    def test_surrounding_whitespace(self):
        """앞뒤 공백/개행은 허용"""
        assert parse_command_output('\n  [1, 2]\n') == [1, 2]

    def test_scalar(self):
        assert parse_command_output("true") is True

    def test_null(self):
        """JSON null은 None"""
        assert parse_command_output("null") is None

    def test_utf8_bytes(self):
        """프로세스 출력 bytes는 UTF-8로 디코딩"""
        assert parse_command_output('{"name": "서울"}'.encode("utf-8")) == {"name": "서울"}

    @pytest.mark.parametrize("stdout", [b"\xff\xfe{}", b"\xfe\xff\x00{\x00}", b'{"a": "\xc3"}'])
    def test_invalid_utf8_rejected(self, stdout):
        """UTF-8이 아닌 bytes는 다른 인코딩으로 추측하지 않고 거부"""
        with pytest.raises(OutputParseError) as exc_info:
            parse_command_output(stdout)

        assert isinstance(exc_info.value.cause, UnicodeDecodeError)
        assert "\ufffd" in exc_info.value.output

    def test_deep_nesting_rejected(self):
        """중첩이 너무 깊은 JSON은 RecursionError 대신 OutputParseError"""
        with pytest.raises(OutputParseError) as exc_info:
            parse_command_output("[" * 200000 + "]" * 200000)

        assert isinstance(exc_info.value.cause, RecursionError)

    @pytest.mark.parametrize("stdout", ["", "   \n", None])
    def test_empty(self, stdout):
        with pytest.raises(OutputParseError):
            parse_command_output(stdout)

    def test_mixed_text_rejected(self):
        """진단 텍스트가 stdout에 섞이면 거부"""
        with pytest.raises(OutputParseError) as exc_info:
            parse_command_output('Creating VPC...\n{"vpc_id": "vpc-1"}')

        assert exc_info.value.cause is not None
        assert exc_info.value.details["output_preview"].startswith("Creating VPC")

    def test_preview_truncated(self):
        with pytest.raises(OutputParseError) as exc_info:
            parse_command_output("x" * 500)

        assert len(exc_info.value.details["output_preview"]) == 200


class TestTailLines:
    """tail_lines 테스트"""

    def test_last_lines(self):
        assert tail_lines("a\nb\nc\nd\n", 2) == "c\nd"

    def test_fewer_lines(self):
        assert tail_lines("only", 5) == "only"

    def test_empty(self):
        assert tail_lines("", 3) == ""


class TestDecodeStream:
    """decode_stream 테스트"""

    def test_none(self):
        assert decode_stream(None) == ""

    def test_str_unchanged(self):
        assert decode_stream("abc") == "abc"

    def test_strict_raises(self):
        with pytest.raises(UnicodeDecodeError):
            decode_stream(b"\xff")

    def test_replace(self):
        assert decode_stream(b"ok \xff", errors="replace") == "ok \ufffd"
