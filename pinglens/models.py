"""
Data models for PingLens
"""

from dataclasses import dataclass, field, asdict, replace
from typing import Optional, Union


# Summary fields hold floats while parsing and fixed 3-decimal text once finalized
Summary = Union[float, str]


@dataclass
class PingConfig:
    """
    Cross platform ping configuration.

    Fields left as None are filled with platform defaults by the
    argument builders (see pinglens.builder).
    """
    v6: Optional[bool] = None
    packet_size: Optional[int] = None
    numeric: bool = True
    timeout: Optional[int] = None
    deadline: Optional[int] = None
    min_reply: int = 1
    source_addr: str = ''
    extra: list[str] = field(default_factory=list)

    def copy(self, **changes) -> 'PingConfig':
        """Return a copy with the given fields replaced"""
        changes.setdefault('extra', list(self.extra))
        return replace(self, **changes)


@dataclass
class PingResponse:
    """Parsed result of one ping invocation"""
    input_host: str
    host: Optional[str] = None
    numeric_host: Optional[str] = None
    alive: bool = False
    output: Optional[str] = None
    time: Optional[float] = None
    times: list[float] = field(default_factory=list)
    min: Summary = 0
    max: Summary = 0
    avg: Summary = 0
    stddev: Optional[Summary] = None
    packet_loss: Optional[Summary] = None

    def to_dict(self) -> dict:
        return asdict(self)
