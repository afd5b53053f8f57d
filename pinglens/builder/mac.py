"""
Command-line builder for macOS / FreeBSD ping
"""

from ..models import PingConfig
from .base import BaseBuilder


class MacBuilder(BaseBuilder):
    """
    Arguments for /sbin/ping and /sbin/ping6.

    -W is the per-reply wait in milliseconds and only exists on ping;
    -t is the overall timeout in seconds.
    """

    DEFAULTS = {
        'v6': False,
        'timeout': 2,
        'packet_size': 56,
    }

    def get_command_arguments(self, target: str, config: PingConfig) -> list[str]:
        args = []

        if config.numeric:
            args.append('-n')

        if config.timeout and not config.v6:
            args += ['-W', str(int(config.timeout * 1000))]

        if config.deadline:
            args += ['-t', str(int(config.deadline))]

        if config.min_reply:
            args += ['-c', str(int(config.min_reply))]

        if config.source_addr:
            args += ['-S', config.source_addr]

        if config.packet_size:
            args += ['-s', str(int(config.packet_size))]

        args += list(config.extra)
        args.append(target)
        return args
