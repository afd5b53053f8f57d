"""
Ping output parsers for PingLens
"""

from .base import BaseVariant, Phase, PingParser, UnknownPhaseError
from .linux import LinuxVariant
from .mac import MacVariant
from .windows import WindowsVariant
from .factory import (
    UnsupportedPlatformError,
    create_parser,
    create_variant,
    is_linux,
    is_macos,
    is_platform_supported,
    is_windows,
)

__all__ = [
    'BaseVariant', 'Phase', 'PingParser', 'UnknownPhaseError',
    'LinuxVariant', 'MacVariant', 'WindowsVariant',
    'UnsupportedPlatformError', 'create_parser', 'create_variant',
    'is_linux', 'is_macos', 'is_platform_supported', 'is_windows',
]
