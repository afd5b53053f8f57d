"""
Command-line builder for Windows ping.exe
"""

import subprocess

from ..models import PingConfig
from .base import BaseBuilder


class WindowsBuilder(BaseBuilder):
    """
    Arguments for ping.exe.

    ping.exe takes its timeout in milliseconds while PingConfig uses
    seconds. It has no deadline option.
    """

    DEFAULTS = {
        'v6': False,
        'timeout': 5,
        'packet_size': 32,
    }

    def get_command_arguments(self, target: str, config: PingConfig) -> list[str]:
        if config.deadline:
            raise ValueError("There is no deadline option on windows")

        args = ['-6' if config.v6 else '-4']

        if not config.numeric:
            args.append('-a')

        if config.timeout:
            args += ['-w', str(int(config.timeout * 1000))]

        if config.min_reply:
            args += ['-n', str(int(config.min_reply))]

        if config.source_addr:
            args += ['-S', config.source_addr]

        if config.packet_size:
            args += ['-l', str(int(config.packet_size))]

        args += list(config.extra)
        args.append(target)
        return args

    def get_spawn_options(self) -> dict:
        # Don't flash a console window when launched from a GUI process
        return {'creationflags': getattr(subprocess, 'CREATE_NO_WINDOW', 0)}
