"""AppleScript bridge: commands, executors, plist decoding and mapping."""

from moneymoney.bridge.base import Executor, RecordingExecutor
from moneymoney.bridge.commands import Operation, build_command
from moneymoney.bridge.plist import decode_plist, encode_plist

__all__ = [
    "Executor",
    "RecordingExecutor",
    "Operation",
    "build_command",
    "decode_plist",
    "encode_plist",
]
