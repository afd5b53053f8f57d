"""
Ping orchestrator: run the system ping and parse what it prints
"""

import ipaddress
import logging
import subprocess
import sys
from typing import Iterable, Optional

from .builder import create_builder, get_executable_path
from .models import PingConfig, PingResponse
from .parser import create_parser


logger = logging.getLogger(__name__)


class PingExecutionError(RuntimeError):
    """Raised when the ping executable cannot be started"""


def is_ipv6(host: str) -> bool:
    """True if host is an IPv6 literal (not a hostname)"""
    try:
        return isinstance(ipaddress.ip_address(host), ipaddress.IPv6Address)
    except ValueError:
        return False


def _with_ip_version(host: str, config: Optional[PingConfig]) -> PingConfig:
    config = config or PingConfig()
    if config.v6 is None:
        config = config.copy(v6=is_ipv6(host))
    return config


def parse_lines(lines: Iterable[str], host: str, platform: Optional[str] = None,
                config: Optional[PingConfig] = None) -> PingResponse:
    """
    Parse lines already captured from ping.

    Args:
        lines: Output lines in the order ping printed them
        host: Target the output was produced for
        platform: sys.platform style name of the OS that produced them
        config: Configuration ping was run with

    Returns:
        Parsed PingResponse
    """
    config = _with_ip_version(host, config)
    parser = create_parser(host, platform, config)
    return parser.feed(lines).finalize()


def parse_output(text: str, host: str, platform: Optional[str] = None,
                 config: Optional[PingConfig] = None) -> PingResponse:
    """Parse the complete stdout of one ping run"""
    return parse_lines(text.split('\n'), host, platform, config)


class Pinger:
    """
    Run the platform ping against a host and parse its output.

    The platform decides both the command line and the output grammar;
    it defaults to the running OS.
    """

    def __init__(self, platform: Optional[str] = None):
        self.platform = platform or sys.platform
        self.builder = create_builder(self.platform)

    def command(self, host: str, config: PingConfig) -> list[str]:
        """Full command line (executable first) for a resolved config"""
        executable = get_executable_path(self.platform, bool(config.v6))
        return [executable] + self.builder.get_command_arguments(host, config)

    def probe(self, host: str, config: Optional[PingConfig] = None) -> PingResponse:
        """
        Ping host once with the given configuration.

        A host that does not answer is not an error: the response simply
        comes back with alive=False.

        Args:
            host: Hostname or IP address
            config: Ping configuration; unset fields use platform defaults

        Returns:
            Parsed PingResponse

        Raises:
            PingExecutionError: If ping could not be started
            ValueError: If the config asks for an option the platform lacks
        """
        config = self.builder.resolve_config(_with_ip_version(host, config))
        cmd = self.command(host, config)

        logger.debug("Executing ping: %s", ' '.join(cmd))
        stdout = self._run(cmd)

        return parse_output(stdout, host, self.platform, config)

    def _run(self, cmd: list[str]) -> str:
        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                shell=False,
                **self.builder.get_spawn_options()
            )
        except OSError as e:
            raise PingExecutionError(
                "ping.probe: there was an error while executing the ping program. "
                "Check the path or permissions..."
            ) from e

        logger.debug("Ping exited: returncode=%d", result.returncode)
        return (result.stdout or b'').decode(errors='replace')


def probe(host: str, config: Optional[PingConfig] = None,
          platform: Optional[str] = None) -> PingResponse:
    """Convenience function for a single ping"""
    return Pinger(platform).probe(host, config)
