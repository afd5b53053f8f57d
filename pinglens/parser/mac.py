"""
macOS / BSD ping output grammar
"""

from typing import Optional

from . import unix
from .base import BaseVariant, Phase


def parse_header(line: str) -> tuple[Optional[str], Optional[str]]:
    """
    Host and numeric host from the banner line.

    >>> parse_header('PING google.com (172.217.14.206): 56 data bytes')
    ('google.com', '172.217.14.206')
    """
    tokens = line.split(' ')
    host = tokens[1] if len(tokens) > 1 else None
    # '(172.217.14.206):' -> '172.217.14.206'
    numeric_host = tokens[2][1:-2] if len(tokens) > 2 else None
    return host, numeric_host


class MacVariant(BaseVariant):
    """
    Grammar of /sbin/ping on macOS and FreeBSD.

    Body and footer use the shared Unix grammar.
    """

    name = 'darwin'

    def process_header(self, line: str, parser):
        host, numeric_host = parse_header(line)
        parser.response.host = host
        parser.response.numeric_host = numeric_host
        parser.change_phase(Phase.BODY)

    def process_body(self, line: str, parser):
        unix.process_body(line, parser)

    def process_footer(self, line: str, parser):
        unix.process_footer(line, parser)
