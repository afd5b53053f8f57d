"""
Windows ping.exe output grammar

Windows output is localised, so field names ('bytes', 'time', 'TTL')
cannot be relied on. Reply lines are recognised by their key=value
shape instead, anchored on the configured payload size for IPv4.

    Pinging google.com [142.250.185.46] with 32 bytes of data:
    Reply from 142.250.185.46: bytes=32 time=15ms TTL=117

    Ping statistics for 142.250.185.46:
        Packets: Sent = 1, Received = 1, Lost = 0 (0% loss),
    Approximate round trip times in milli-seconds:
        Minimum = 15ms, Maximum = 15ms, Average = 15ms
"""

import re
from dataclasses import dataclass
from typing import Optional

from .base import BaseVariant, Phase
from .unix import numbers, to_float


IPV4_RE = re.compile(
    r'^(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}'
    r'(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)$'
)
BRACKET_RE = re.compile(r'\[(.*)\]')
LEADING_NUMBER_RE = re.compile(r'[0-9.]+')
# 'ms' and the Russian 'мс'
TIME_UNIT_RE = re.compile(r'(ms|мс)', re.IGNORECASE)
# 'ms' and the Russian 'мсек'
SUMMARY_UNIT_RE = re.compile(r'(ms|мсек)', re.IGNORECASE)
PACKET_LOSS_RE = re.compile(r'([\d.]+)%')

DEFAULT_PACKET_SIZE = 32
NUMERIC_HOST_UNKNOWN = 'NA'
# bytes=, time= and TTL=
IPV4_REPLY_FIELDS = 3
IPV6_REPLY_FIELDS = 1
SUMMARY_KEYS = ('min', 'max', 'avg')


@dataclass
class WindowsSummary:
    """Fields found on one footer line"""
    packet_loss: Optional[float] = None
    min: Optional[float] = None
    max: Optional[float] = None
    avg: Optional[float] = None
    is_rtt_line: bool = False


def parse_header(line: str) -> tuple[Optional[str], Optional[str]]:
    """
    Host and numeric host from the banner line.

    Numeric targets are printed bare; named targets carry the address
    in brackets after the name.
    """
    tokens = line.split(' ')

    if '[' not in line:
        host = next((t for t in tokens if IPV4_RE.match(t)), None)
        return host, host

    bracketed = next((t for t in tokens if '[' in t), None)
    if bracketed is None:
        return None, None

    match = BRACKET_RE.search(bracketed)
    numeric_host = match.group(1) if match else NUMERIC_HOST_UNKNOWN

    index = tokens.index(bracketed)
    host = tokens[index - 1] if index > 0 else None
    return host, numeric_host


def data_fields(tokens: list[str]) -> list[int]:
    """Indexes of tokens shaped like key=value or key<value"""
    return [i for i, t in enumerate(tokens) if '=' in t or '<' in t]


def leading_number(field: Optional[str]) -> Optional[float]:
    if not field:
        return None
    match = LEADING_NUMBER_RE.search(field)
    return to_float(match.group(0)) if match else None


def parse_ipv4_reply(line: str, packet_size: int) -> Optional[float]:
    """
    Round-trip time of an IPv4 reply line.

    The time field is the one right after the 'bytes=<packet_size>'
    field, whatever the locale calls it.
    """
    tokens = line.split(' ')
    fields = [tokens[i] for i in data_fields(tokens)]
    if len(fields) < IPV4_REPLY_FIELDS:
        return None

    size_token = f"={packet_size}"
    size_index = next((i for i, f in enumerate(fields) if f.endswith(size_token)), None)
    if size_index is None or size_index + 1 >= len(fields):
        return None

    return leading_number(fields[size_index + 1])


def parse_ipv6_reply(line: str) -> Optional[float]:
    """
    Round-trip time of an IPv6 reply line.

    Some locales (French) print 'temps=15 ms' with the unit as a
    separate token; it is glued back before matching the time field.
    """
    tokens = line.split(' ')
    fields = []
    for i in data_fields(tokens):
        field = tokens[i]
        if i + 1 < len(tokens) and tokens[i + 1] == 'ms':
            field += 'ms'
        fields.append(field)

    if len(fields) < IPV6_REPLY_FIELDS:
        return None

    time_field = next((f for f in fields if TIME_UNIT_RE.search(f)), None)
    return leading_number(time_field)


def is_summary_banner(line: str) -> bool:
    return line.endswith(':')


def parse_summary(line: str) -> WindowsSummary:
    """Packet loss and min/max/avg found on a footer line"""
    summary = WindowsSummary()

    loss = PACKET_LOSS_RE.search(line)
    if loss:
        summary.packet_loss = to_float(loss.group(1))

    if SUMMARY_UNIT_RE.search(line):
        summary.is_rtt_line = True
        # Windows prints Minimum, Maximum, Average in that order
        for key, value in zip(SUMMARY_KEYS, numbers(line, len(SUMMARY_KEYS))):
            setattr(summary, key, value)

    return summary


class WindowsVariant(BaseVariant):
    """Grammar of ping.exe, with separate IPv4 and IPv6 reply shapes"""

    name = 'win32'

    @property
    def packet_size(self) -> int:
        return self.config.packet_size or DEFAULT_PACKET_SIZE

    def process_header(self, line: str, parser):
        host, numeric_host = parse_header(line)
        parser.response.host = host
        parser.response.numeric_host = numeric_host
        parser.change_phase(Phase.BODY)

    def process_body(self, line: str, parser):
        if is_summary_banner(line):
            parser.change_phase(Phase.FOOTER)
            return

        if self.config.v6:
            rtt = parse_ipv6_reply(line)
        else:
            rtt = parse_ipv4_reply(line, self.packet_size)

        if rtt is not None:
            parser.add_time(rtt)

    def process_footer(self, line: str, parser):
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
