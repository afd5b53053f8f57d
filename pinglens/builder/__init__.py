"""
Ping command-line builders for PingLens
"""

from .base import BaseBuilder
from .linux import LinuxBuilder
from .mac import MacBuilder
from .windows import WindowsBuilder
from .factory import create_builder, get_executable_path

__all__ = [
    'BaseBuilder', 'LinuxBuilder', 'MacBuilder', 'WindowsBuilder',
    'create_builder', 'get_executable_path',
]
