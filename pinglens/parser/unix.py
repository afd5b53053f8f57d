"""
Body and footer grammar shared by Linux and macOS/BSD ping

Both families print reply lines such as

    64 bytes from 93.184.216.34: icmp_seq=0 ttl=56 time=11.632 ms

followed by a '--- host ping statistics ---' banner and a summary

    4 packets transmitted, 4 received, 0% packet loss, time 3004ms
    rtt min/avg/max/mdev = 10.964/11.632/12.270/0.460 ms
"""

import re
from dataclasses import dataclass
from typing import Optional

from .base import Phase


REPLY_TIME_RE = re.compile(r'([0-9.]+)[ ]*ms')
PACKET_LOSS_RE = re.compile(r' ([\d.]+)%')
NUMBER_RE = re.compile(r'[0-9.]+')

# A reply line carries icmp_seq=, ttl= and time=
MIN_REPLY_EQUALS = 3
# min/avg/max/stddev
MIN_SUMMARY_SLASHES = 3
SUMMARY_KEYS = ('min', 'avg', 'max', 'stddev')


@dataclass
class UnixSummary:
    """Fields found on one footer line"""
    packet_loss: Optional[float] = None
    min: Optional[float] = None
    avg: Optional[float] = None
    max: Optional[float] = None
    stddev: Optional[float] = None
    is_rtt_line: bool = False


def to_float(text: Optional[str]) -> Optional[float]:
    """float() that returns None for text such as '.' or '1.2.3'"""
    if text is None:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def numbers(line: str, limit: Optional[int] = None) -> list[Optional[float]]:
    """
    Numeric tokens of line in textual order.

    Tokens that are not valid floats are kept as None so positions
    still line up with the platform's field order.
    """
    found = [to_float(m) for m in NUMBER_RE.findall(line)]
    return found[:limit] if limit is not None else found


def parse_reply_time(line: str) -> Optional[float]:
    """
    Round-trip time of a reply line, or None for any other line.

    >>> parse_reply_time('64 bytes from 1.1.1.1: icmp_seq=0 ttl=56 time=11.632 ms')
    11.632
    """
    if line.count('=') < MIN_REPLY_EQUALS:
        return None

    match = REPLY_TIME_RE.search(line)
    if not match:
        return None
    return to_float(match.group(1))


def is_statistics_banner(line: str) -> bool:
    return '---' in line


def parse_summary(line: str) -> UnixSummary:
    """Packet loss and min/avg/max/stddev found on a footer line"""
    summary = UnixSummary()

    loss = PACKET_LOSS_RE.search(line)
    if loss:
        summary.packet_loss = to_float(loss.group(1))

    if line.count('/') >= MIN_SUMMARY_SLASHES:
        summary.is_rtt_line = True
        for key, value in zip(SUMMARY_KEYS, numbers(line, len(SUMMARY_KEYS))):
            setattr(summary, key, value)

    return summary


def process_body(line: str, parser):
    """Collect a sample from a reply line; move to FOOTER on the '---' banner"""
    rtt = parse_reply_time(line)
    if rtt is not None:
        parser.add_time(rtt)

    if is_statistics_banner(line):
        parser.change_phase(Phase.FOOTER)


def process_footer(line: str, parser):
    """Copy footer statistics into the response; the rtt line ends parsing"""
    summary = parse_summary(line)
    response = parser.response

    if summary.packet_loss is not None:
        response.packet_loss = summary.packet_loss

    if summary.is_rtt_line:
        for key in SUMMARY_KEYS:
            value = getattr(summary, key)
            if value is not None:
                setattr(response, key, value)
        parser.change_phase(Phase.END)
