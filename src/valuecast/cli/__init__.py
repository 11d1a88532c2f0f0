"""CLI for valuecast.

Provides commands for guessing and casting values from the shell.

Usage:
    valuecast guess 10.44 -t integer -t float -t string
    valuecast cast '["1", "2"]' 'int[]' --parse-json
    valuecast cast 1700000000 datetime --parse-json --json

Environment:
    Loads .env file from current directory if present.
    Settings use the VALUECAST_ prefix (VALUECAST_LOG_FORMAT=json).
"""

from valuecast.cli.main import app, main

__all__ = ["app", "main"]
