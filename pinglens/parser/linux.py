"""
Linux (iputils) ping output grammar
"""

import re
from typing import Optional

from . import unix
from .base import BaseVariant, Phase


ADDRESS_RE = re.compile(r'[^\s()]+')
# Trailing '56(84) bytes of data.' or '56 data bytes'
TRAILER_TOKENS = 3


def parse_header(line: str) -> tuple[Optional[str], Optional[str]]:
    """
    Host and numeric host from the banner line.

    Handles both shapes iputils prints:

        PING 93.184.216.34 (93.184.216.34) 56(84) bytes of data.
        PING google.com(lhr25s34-in-x0e.1e100.net (2a00:1450:4009:81f::200e)) 56 data bytes
    """
    tokens = line.split(' ')
    if len(tokens) < 2:
        return None, None

    if '(' not in tokens[1]:
        host = tokens[1]
        numeric_host = tokens[2][1:-1] if len(tokens) > 2 else None
        return host, numeric_host

    # Hostname glued to a parenthesised address; collect every bare word
    found = ADDRESS_RE.findall(''.join(tokens[1:-TRAILER_TOKENS]))
    if not found:
        return None, None
    return found[0], found[-1]


class LinuxVariant(BaseVariant):
    """Grammar of iputils ping; body and footer follow the shared Unix grammar"""

    name = 'linux'

    def process_header(self, line: str, parser):
        host, numeric_host = parse_header(line)
        parser.response.host = host
        parser.response.numeric_host = numeric_host
        parser.change_phase(Phase.BODY)

    def process_body(self, line: str, parser):
        unix.process_body(line, parser)

    def process_footer(self, line: str, parser):
        unix.process_footer(line, parser)
