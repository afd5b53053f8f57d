"""
Platform detection and parser construction
"""

import logging
import sys
from typing import Optional

from ..models import PingConfig
from .base import BaseVariant, PingParser
from .linux import LinuxVariant
from .mac import MacVariant
from .windows import WindowsVariant


logger = logging.getLogger(__name__)

LINUX_PLATFORMS = ('linux', 'android', 'aix')
MACOS_PLATFORMS = ('darwin', 'freebsd')


class UnsupportedPlatformError(ValueError):
    """Raised for a platform whose ping output cannot be parsed"""

    def __init__(self, platform: str):
        super().__init__(f"Platform |{platform}| is not support")
        self.platform = platform


def is_linux(platform: Optional[str]) -> bool:
    # sys.platform reports e.g. 'linux' or 'aix7' depending on the interpreter
    return bool(platform) and platform.startswith(LINUX_PLATFORMS)


def is_macos(platform: Optional[str]) -> bool:
    # 'freebsd14' on FreeBSD
    return bool(platform) and platform.startswith(MACOS_PLATFORMS)


def is_windows(platform: Optional[str]) -> bool:
    return bool(platform) and platform.startswith('win')


def is_platform_supported(platform: Optional[str]) -> bool:
    return is_windows(platform) or is_linux(platform) or is_macos(platform)


def create_variant(platform: Optional[str] = None,
                   config: Optional[PingConfig] = None) -> BaseVariant:
    """
    Create the output grammar for a platform.

    Args:
        platform: sys.platform style name, defaults to the running OS
        config: Ping configuration the output was produced with

    Raises:
        UnsupportedPlatformError: If the platform is not supported
    """
    platform = platform or sys.platform
    config = config or PingConfig()

    if is_windows(platform):
        return WindowsVariant(config)
    if is_macos(platform):
        return MacVariant(config)
    if is_linux(platform):
        return LinuxVariant(config)

    raise UnsupportedPlatformError(platform)


def create_parser(addr: str, platform: Optional[str] = None,
                  config: Optional[PingConfig] = None) -> PingParser:
    """Create a parser for output of ping run against addr on platform"""
    variant = create_variant(platform, config)
    logger.debug("Created %s parser for %s", variant.name, addr)
    return PingParser(addr, variant)
