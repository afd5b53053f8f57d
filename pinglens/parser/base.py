"""
Line-oriented state machine for system ping output
"""

import copy
import logging
import re
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Optional

from ..aggregator import StatisticsAggregator
from ..models import PingConfig, PingResponse


logger = logging.getLogger(__name__)


class Phase(IntEnum):
    """Lifecycle of one ping output stream, in the order it is produced"""
    INIT = 0
    HEADER = 1
    BODY = 2
    FOOTER = 3
    END = 4


class UnknownPhaseError(RuntimeError):
    """Raised when the parser is asked to enter a phase that does not exist"""


class BaseVariant(ABC):
    """
    Abstract base class for platform output grammars.

    A variant is stateless apart from its configuration: everything it
    learns from a line is written into the parser passed to each handler.
    """

    name = 'base'

    def __init__(self, config: Optional[PingConfig] = None):
        self.config = config or PingConfig()

    @abstractmethod
    def process_header(self, line: str, parser: 'PingParser'):
        """
        Handle a line while the parser is in INIT or HEADER.

        Args:
            line: Stripped, non-empty line from system ping
            parser: Parser owning the response being built
        """
        pass

    @abstractmethod
    def process_body(self, line: str, parser: 'PingParser'):
        """Handle a line while the parser is in BODY"""
        pass

    @abstractmethod
    def process_footer(self, line: str, parser: 'PingParser'):
        """Handle a line while the parser is in FOOTER"""
        pass


class PingParser:
    """
    Finite-state parser for the output of one ping invocation.

    Lines are fed in the order ping printed them via consume(). Each
    non-blank line goes to the handler of the active platform variant
    for the current phase. finalize() returns the aggregated result.

    Usage:
        parser = PingParser('example.com', LinuxVariant())
        for line in stdout.split('\\n'):
            parser.consume(line)
        response = parser.finalize()
    """

    _STRIP_RE = re.compile(r'[ ]*\r?\n?$')

    def __init__(self, addr: str, variant: BaseVariant,
                 aggregator: Optional[StatisticsAggregator] = None):
        self.variant = variant
        self.aggregator = aggregator or StatisticsAggregator()
        self.response = PingResponse(input_host=addr)
        self._phase = Phase.INIT
        self._times: list[float] = []
        self._lines: list[str] = []

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def times(self) -> list[float]:
        return list(self._times)

    def add_time(self, value: float):
        """Record one round-trip sample in milliseconds"""
        self._times.append(value)

    def change_phase(self, phase) -> 'PingParser':
        """
        Move the parser to another phase.

        Only forward moves take effect; asking for an earlier phase keeps
        the current one.

        Raises:
            UnknownPhaseError: If phase is not a member of Phase
        """
        try:
            phase = Phase(phase)
        except ValueError:
            raise UnknownPhaseError(f"Unknown phase: {phase!r}")

        if phase > self._phase:
            logger.debug("Phase change: %s -> %s", self._phase.name, phase.name)
            self._phase = phase

        return self

    def consume(self, line: str) -> 'PingParser':
        """
        Process a line from system ping.

        Args:
            line: Raw line, with or without its trailing newline

        Returns:
            This parser, so calls can be chained
        """
        self._lines.append(line)

        stripped = self._STRIP_RE.sub('', line, count=1)
        if not stripped:
            return self

        phase = self._phase
        if phase in (Phase.INIT, Phase.HEADER):
            self.variant.process_header(stripped, self)
        elif phase == Phase.BODY:
            self.variant.process_body(stripped, self)
        elif phase == Phase.FOOTER:
            self.variant.process_footer(stripped, self)
        elif phase == Phase.END:
            pass
        else:
            raise UnknownPhaseError(f"Unknown phase: {phase!r}")

        return self

    def feed(self, lines) -> 'PingParser':
        """Consume every line of an iterable"""
        for line in lines:
            self.consume(line)
        return self

    def finalize(self) -> PingResponse:
        """
        Build the result from everything consumed so far.

        The parser's own state is left untouched, so calling this twice
        without consuming more lines gives equal results.
        """
        response = copy.deepcopy(self.response)
        response.output = '\n'.join(self._lines)
        return self.aggregator.aggregate(response, self._times)
