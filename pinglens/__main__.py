"""
PingLens - Structured System Ping

Entry point for running as a module:
    python -m pinglens <target>
"""

from .cli import main

if __name__ == '__main__':
    main()
