"""Unit tests for the PingParser state machine.

These tests drive the parser with a recording variant so dispatch, phase
handling and finalization can be checked independently of any platform
grammar, then repeat the key properties against real fixture output.
"""

import pytest

from pinglens.models import PingConfig
from pinglens.parser import (
    BaseVariant,
    LinuxVariant,
    Phase,
    PingParser,
    UnknownPhaseError,
    create_parser,
)


class RecordingVariant(BaseVariant):
    """Variant that records every call and moves through phases on keywords."""

    def __init__(self):
        super().__init__()
        self.calls = []

    def process_header(self, line, parser):
        self.calls.append(("header", line))
        parser.change_phase(Phase.BODY)

    def process_body(self, line, parser):
        self.calls.append(("body", line))
        if line == "footer":
            parser.change_phase(Phase.FOOTER)
        elif line.startswith("rtt "):
            parser.add_time(float(line.split()[1]))

    def process_footer(self, line, parser):
        self.calls.append(("footer", line))
        if line == "done":
            parser.change_phase(Phase.END)


@pytest.fixture
def variant():
    return RecordingVariant()


@pytest.fixture
def parser(variant):
    return PingParser("example.com", variant)


class TestConsumeDispatch:
    """Test routing of lines to phase handlers."""

    def test_starts_in_init(self, parser):
        """A new parser starts in INIT with an empty record."""
        assert parser.phase == Phase.INIT
        assert parser.response.input_host == "example.com"
        assert parser.times == []

    def test_lines_routed_by_phase(self, parser, variant):
        """Header, body and footer lines reach the matching handler."""
        for line in ["PING example.com", "rtt 1.5", "footer", "stats", "done", "after end"]:
            parser.consume(line)

        assert variant.calls == [
            ("header", "PING example.com"),
            ("body", "rtt 1.5"),
            ("body", "footer"),
            ("footer", "stats"),
            ("footer", "done"),
        ]
        assert parser.phase == Phase.END

    def test_consume_returns_parser(self, parser):
        """consume() returns the parser so calls can be chained."""
        assert parser.consume("PING example.com").consume("rtt 2") is parser

    def test_trailing_whitespace_and_crlf_stripped(self, parser, variant):
        """Trailing spaces, carriage return and newline are removed before dispatch."""
        parser.consume("PING example.com   \r\n")
        assert variant.calls == [("header", "PING example.com")]

    def test_leading_whitespace_kept(self, parser, variant):
        """Only trailing whitespace is stripped."""
        parser.consume("    indented header")
        assert variant.calls == [("header", "    indented header")]

    def test_blank_lines_ignored_in_every_phase(self, parser, variant):
        """Blank and whitespace-only lines never reach a handler."""
        lines = ["", "  ", "\r\n", "PING example.com", "", "rtt 3", "   \r", "footer", "", "done"]
        for line in lines:
            parser.consume(line)

        assert [kind for kind, _ in variant.calls] == ["header", "body", "body", "footer"]

    def test_leading_blank_lines_keep_header_pending(self, parser, variant):
        """Blank lines before the header do not consume the header slot."""
        parser.consume("")
        parser.consume("\r")
        assert parser.phase == Phase.INIT

        parser.consume("PING example.com")
        assert variant.calls == [("header", "PING example.com")]

    def test_end_phase_is_noop(self, parser, variant):
        """Lines consumed after END are recorded in output but not parsed."""
        parser.change_phase(Phase.END)
        parser.consume("rtt 99")

        assert variant.calls == []
        assert parser.finalize().output == "rtt 99"

    def test_corrupted_phase_raises(self, parser):
        """A phase outside the enumeration is a programmer error."""
        parser._phase = 42
        with pytest.raises(UnknownPhaseError):
            parser.consume("PING example.com")


class TestChangePhase:
    """Test phase transitions."""

    def test_forward_transition(self, parser):
        parser.change_phase(Phase.BODY)
        assert parser.phase == Phase.BODY

    def test_accepts_integer_values(self, parser):
        """Integer values of enumerated phases are accepted."""
        parser.change_phase(3)
        assert parser.phase is Phase.FOOTER

    def test_backward_transition_ignored(self, parser):
        """A request for an earlier phase keeps the current one."""
        parser.change_phase(Phase.FOOTER)
        parser.change_phase(Phase.BODY)
        assert parser.phase == Phase.FOOTER

    def test_same_phase_twice_harmless(self, parser):
        parser.change_phase(Phase.END)
        parser.change_phase(Phase.END)
        assert parser.phase == Phase.END

    @pytest.mark.parametrize("bad", [5, -1, "BODY", None])
    def test_unknown_phase_raises(self, parser, bad):
        """Values outside the enumeration raise UnknownPhaseError."""
        with pytest.raises(UnknownPhaseError, match="Unknown phase"):
            parser.change_phase(bad)
        assert parser.phase == Phase.INIT


class TestFinalize:
    """Test result assembly."""

    def test_output_joins_raw_lines(self, parser):
        """output keeps every consumed line verbatim, including blanks."""
        lines = ["PING example.com\r", "", "rtt 1"]
        for line in lines:
            parser.consume(line)

        assert parser.finalize().output == "PING example.com\r\n\nrtt 1"

    def test_finalize_twice_identical(self, parser):
        """Calling finalize() twice without new lines gives equal records."""
        for line in ["PING example.com", "rtt 1", "rtt 3"]:
            parser.consume(line)

        assert parser.finalize() == parser.finalize()

    def test_finalize_returns_copy(self, parser):
        """Mutating a finalized record does not leak into the parser."""
        parser.consume("PING example.com")
        parser.consume("rtt 1")

        first = parser.finalize()
        first.times.append(100.0)
        first.host = "changed"

        second = parser.finalize()
        assert second.times == [1.0]
        assert second.host is None

    def test_parser_keeps_floats_after_finalize(self, parser):
        """Formatting to text happens on the copy only."""
        parser.response.avg = 2.0
        parser.finalize()
        assert parser.response.avg == 2.0

    def test_empty_stream(self, parser):
        """A parser that saw nothing still returns a record."""
        response = parser.finalize()

        assert response.alive is False
        assert response.times == []
        assert response.time is None
        assert response.output == ""
        assert response.min == "0.000"
        assert response.stddev is None
        assert response.packet_loss is None


class TestParserProperties:
    """Properties checked against real Linux output."""

    def _lines(self, load_fixture):
        return load_fixture("linux/ipv4_hostname.txt").split("\n")

    def test_phase_never_regresses(self, load_fixture):
        """Observed phases are non-decreasing over a whole stream."""
        parser = PingParser("example.com", LinuxVariant())
        seen = []
        for line in self._lines(load_fixture):
            parser.consume(line)
            seen.append(parser.phase)

        assert seen == sorted(seen)
        assert seen[-1] == Phase.END

    def test_blank_lines_do_not_change_result(self, load_fixture):
        """Inserting blank lines changes only output."""
        lines = self._lines(load_fixture)
        padded = []
        for line in lines:
            padded += ["", "   ", line, "\r"]

        plain = create_parser("example.com", "linux").feed(lines).finalize()
        noisy = create_parser("example.com", "linux").feed(padded).finalize()

        assert noisy.output != plain.output
        noisy.output = plain.output
        assert noisy == plain

    def test_alive_iff_times(self, load_fixture):
        for name in ["linux/ipv4_hostname.txt", "linux/unreachable.txt"]:
            response = create_parser("host", "linux").feed(
                load_fixture(name).split("\n")
            ).finalize()
            assert response.alive == bool(response.times)

    def test_replayed_line_is_counted_twice(self):
        """The parser is not idempotent with respect to replayed lines."""
        parser = create_parser("example.com", "linux", PingConfig())
        reply = "64 bytes from 1.1.1.1: icmp_seq=1 ttl=56 time=5.0 ms"
        parser.consume("PING 1.1.1.1 (1.1.1.1) 56(84) bytes of data.")
        parser.consume(reply)
        parser.consume(reply)

        assert parser.times == [5.0, 5.0]
