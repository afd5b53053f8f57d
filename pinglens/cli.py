import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from . import __version__
from .logging_config import configure_logging
from .models import PingConfig
from .output import ConsoleOutput, JsonExporter
from .parser import UnsupportedPlatformError
from .pinger import Pinger, PingExecutionError, parse_output


console = Console()
logger = logging.getLogger(__name__)

PLATFORMS = ['linux', 'darwin', 'freebsd', 'win32']


@click.command()
@click.argument('target')
@click.option('-c', '--count', 'min_reply', default=1, type=click.IntRange(min=1),
              help='Number of echo requests (default: 1)')
@click.option('-6', '--ipv6', is_flag=True,
              help='Ping over IPv6 (default: detected from TARGET)')
@click.option('-s', '--packet-size', type=click.IntRange(min=0), default=None,
              help='Payload bytes (default: 56, or 32 on Windows)')
@click.option('-W', '--timeout', type=click.IntRange(min=1), default=None,
              help='Seconds to wait for each reply (default: 2, or 5 on Windows)')
@click.option('-w', '--deadline', type=click.IntRange(min=1), default=None,
              help='Seconds before ping exits regardless (Linux/macOS only)')
@click.option('-I', '--source', 'source_addr', default='',
              help='Source address or interface')
@click.option('--numeric/--no-numeric', default=True,
              help='Skip reverse name lookups (default: numeric)')
@click.option('--platform', 'platform_name', type=click.Choice(PLATFORMS),
              help='Output grammar to use (default: this OS)')
@click.option('--input', 'input_path', type=click.Path(exists=True, dir_okay=False),
              help='Parse saved ping output instead of running ping')
@click.option('--raw', is_flag=True,
              help='Also print the raw ping output')
@click.option('--json', 'json_path', type=click.Path(),
              help='Export results to JSON file')
@click.option('-v', '--verbose', is_flag=True,
              help='Enable debug logging')
@click.version_option(version=__version__)
def main(target: str, min_reply: int, ipv6: bool, packet_size: Optional[int],
         timeout: Optional[int], deadline: Optional[int], source_addr: str,
         numeric: bool, platform_name: Optional[str], input_path: Optional[str],
         raw: bool, json_path: Optional[str], verbose: bool):
    """
    PingLens - system ping with a structured report.

    Ping TARGET (IP address or hostname) with the platform's own ping
    utility and summarise replies, packet loss and round-trip statistics.

    Examples:

        pinglens 8.8.8.8 -c 4

        pinglens example.com --json result.json

        pinglens example.com --input saved.txt --platform win32
    """
    configure_logging('DEBUG' if verbose else None)

    platform = platform_name or sys.platform
    config = PingConfig(
        v6=True if ipv6 else None,
        packet_size=packet_size,
        numeric=numeric,
        timeout=timeout,
        deadline=deadline,
        min_reply=min_reply,
        source_addr=source_addr,
    )
    output = ConsoleOutput()

    try:
        output.print_header(target, platform, source=input_path)

        if input_path:
            text = Path(input_path).read_text(encoding='utf-8', errors='replace')
            response = parse_output(text, target, platform, config)
        else:
            response = Pinger(platform).probe(target, config)

        if raw:
            output.print_raw(response)
        output.print_replies(response)
        output.print_summary(response)

        if json_path:
            json_file = Path(json_path)
            JsonExporter(platform).export(response, json_file)
            console.print(f"\n[dim]Results exported to:[/] {json_file.absolute()}")

    except (UnsupportedPlatformError, PingExecutionError) as e:
        output.print_error(str(e))
        sys.exit(1)
    except (ValueError, OSError) as e:
        logger.debug("Probe failed", exc_info=True)
        output.print_error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/]")
        sys.exit(130)


if __name__ == '__main__':
    main()
