# tests/cli/test_console_helpers.py
"""
cli/ui/console 헬퍼 함수 단위 테스트

print_result_tree, print_results_json, print_table, 메시지 출력 함수, get_logger.
"""

import json
import logging

import pytest
from rich.logging import RichHandler


@pytest.fixture
def capture(monkeypatch):
    """콘솔 출력을 캡처하는 Console로 교체"""
    import importlib

    from rich.console import Console

    console_module = importlib.import_module("cli.ui.console")

    out = Console(record=True, width=120, color_system=None)
    err = Console(record=True, width=120, color_system=None)
    monkeypatch.setattr(console_module, "console", out)
    monkeypatch.setattr(console_module, "err_console", err)
    return out, err


# =============================================================================
# print_results_json 테스트
# =============================================================================


class TestPrintResultsJson:
    """print_results_json 테스트"""

    def test_round_trip(self, capture):
        """출력이 유효한 JSON"""
        from cli.ui.console import print_results_json

        out, _ = capture
        data = {"us-west-2": {"vpc_id": "vpc-1", "tags": ["[prod]", ":smile:"]}}
        print_results_json(data)

        assert json.loads(out.export_text()) == data

    def test_compact(self, capture):
        from cli.ui.console import print_results_json

        out, _ = capture
        print_results_json([1, 2], pretty=False)

        assert out.export_text().strip() == "[1, 2]"

    def test_non_ascii_kept(self, capture):
        from cli.ui.console import print_results_json

        out, _ = capture
        print_results_json({"name": "서울"})

        assert "서울" in out.export_text()

    def test_stderr_target(self, capture):
        """stderr=True이면 에러 콘솔로만 출력"""
        from cli.ui.console import print_results_json

        out, err = capture
        print_results_json({"error": "MalformedOutput"}, stderr=True)

        assert json.loads(err.export_text()) == {"error": "MalformedOutput"}
        assert out.export_text() == ""


# =============================================================================
# print_result_tree 테스트
# =============================================================================


class TestPrintResultTree:
    """print_result_tree 테스트"""

    def test_nested(self, capture):
        """중첩 dict/list 출력"""
        from cli.ui.console import print_result_tree

        out, _ = capture
        print_result_tree(
            "network.query",
            {"ap-northeast-2": {"vpc_id": "vpc-1", "subnets": ["subnet-a", {"az": "2a"}]}},
        )

        text = out.export_text()
        assert "network.query" in text
        assert "vpc_id: vpc-1" in text
        assert "[0] subnet-a" in text
        assert "az: 2a" in text

    def test_scalar(self, capture):
        from cli.ui.console import print_result_tree

        out, _ = capture
        print_result_tree("network.cleanup", "done")

        assert "done" in out.export_text()

    def test_markup_escaped(self, capture):
        """대괄호 텍스트가 마크업으로 해석되지 않음"""
        from cli.ui.console import print_result_tree

        out, _ = capture
        print_result_tree("[bold]title[/bold]", {"key": "[red]value[/red]"})

        text = out.export_text()
        assert "[bold]title[/bold]" in text
        assert "[red]value[/red]" in text


# =============================================================================
# 메시지 / 테이블 테스트
# =============================================================================


class TestMessages:
    """print_* 메시지 테스트"""

    def test_success_and_info_to_stdout(self, capture):
        from cli.ui.console import SYMBOL_INFO, SYMBOL_SUCCESS, print_info, print_success

        out, err = capture
        print_success("완료")
        print_info("정보")

        text = out.export_text()
        assert f"{SYMBOL_SUCCESS} 완료" in text
        assert f"{SYMBOL_INFO} 정보" in text
        assert err.export_text() == ""

    def test_error_and_warning_to_stderr(self, capture):
        from cli.ui.console import SYMBOL_ERROR, SYMBOL_WARNING, print_error, print_warning

        out, err = capture
        print_error("실패 [0b0e8a0c]")
        print_warning("주의")

        text = err.export_text()
        assert f"{SYMBOL_ERROR} 실패 [0b0e8a0c]" in text
        assert f"{SYMBOL_WARNING} 주의" in text
        assert out.export_text() == ""

    def test_table(self, capture):
        from cli.ui.console import print_table

        out, _ = capture
        print_table("Regions", ["Code", "Provider"], [["ap-northeast-2", "aws"], ["[x]", "gcp"]])

        text = out.export_text()
        assert "Regions" in text
        assert "ap-northeast-2" in text
        assert "[x]" in text


# =============================================================================
# get_logger 테스트
# =============================================================================


class TestGetLogger:
    """get_logger 테스트"""

    def test_rich_handler_added_once(self):
        from cli.ui.console import get_logger

        name = "tests.console.logger"
        logger = get_logger(name, logging.DEBUG)
        get_logger(name, logging.INFO)

        handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        assert len(handlers) == 1
        assert logger.level == logging.INFO
        assert logger.propagate is False

        for handler in handlers:
            logger.removeHandler(handler)
