"""
Builder selection and ping executable lookup
"""

import os
import sys
from typing import Optional

from ..parser.factory import (
    UnsupportedPlatformError,
    is_linux,
    is_macos,
    is_windows,
)
from .base import BaseBuilder
from .linux import LinuxBuilder
from .mac import MacBuilder
from .windows import WindowsBuilder


def create_builder(platform: Optional[str] = None) -> BaseBuilder:
    """
    Create the argument builder for a platform.

    Raises:
        UnsupportedPlatformError: If the platform is not supported
    """
    platform = platform or sys.platform

    if is_linux(platform):
        return LinuxBuilder()
    if is_windows(platform):
        return WindowsBuilder()
    if is_macos(platform):
        return MacBuilder()

    raise UnsupportedPlatformError(platform)


def get_executable_path(platform: Optional[str] = None, v6: bool = False) -> str:
    """
    Path to the ping executable for a platform.

    Args:
        platform: sys.platform style name, defaults to the running OS
        v6: Whether IPv6 ping is wanted

    Raises:
        UnsupportedPlatformError: If the platform is not supported
    """
    platform = platform or sys.platform

    if platform.startswith('aix'):
        return '/usr/sbin/ping'
    if is_linux(platform):
        return 'ping6' if v6 else 'ping'
    if is_windows(platform):
        system_root = os.environ.get('SystemRoot', 'C:\\Windows')
        return system_root + '/system32/ping.exe'
    if is_macos(platform):
        return '/sbin/ping6' if v6 else '/sbin/ping'

    raise UnsupportedPlatformError(platform)
