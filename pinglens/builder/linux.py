"""
Command-line builder for Linux (iputils) ping
"""

import os

from ..models import PingConfig
from .base import BaseBuilder


class LinuxBuilder(BaseBuilder):
    """
    Arguments for iputils ping.

    -W is the per-reply wait in seconds; -w is a hard deadline after
    which ping exits regardless of how many packets were answered.
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

        if config.timeout:
            args += ['-W', str(int(config.timeout))]

        if config.deadline:
            args += ['-w', str(int(config.deadline))]

        if config.min_reply:
            args += ['-c', str(int(config.min_reply))]

        if config.source_addr:
            args += ['-I', config.source_addr]

        if config.packet_size:
            args += ['-s', str(int(config.packet_size))]

        args += list(config.extra)
        args.append(target)
        return args

    def get_spawn_options(self) -> dict:
        # Force the C locale so output matches the English grammar
        env = dict(os.environ)
        env['LANG'] = 'C'
        return {'env': env}
