"""
PingLens - Structured System Ping

Runs the platform ping utility (Linux, macOS/BSD, Windows) and turns its
console output into a structured report: round-trip times, packet loss,
min/avg/max/stddev and liveness.
"""

__version__ = "1.0.0"
__author__ = "PingLens"
