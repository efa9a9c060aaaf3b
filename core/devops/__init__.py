"""
core/devops - 외부 자동화 도구 명령 실행

구성:
    types.py    - Operation, CommandInvocation, ShellResponse
    runner.py   - ProcessRunner Protocol, SubprocessRunner
    output.py   - stdout JSON 파싱
    network.py  - NetworkManager (bootstrap / query / cleanup)
"""

from .network import NetworkManager, bootstrap_args
from .output import parse_command_output
from .runner import ProcessRunner, SubprocessRunner
from .types import CommandInvocation, CommandResult, Operation, ShellResponse

__all__: list[str] = [
    "NetworkManager",
    "bootstrap_args",
    "parse_command_output",
    "ProcessRunner",
    "SubprocessRunner",
    "CommandInvocation",
    "CommandResult",
    "Operation",
    "ShellResponse",
]
