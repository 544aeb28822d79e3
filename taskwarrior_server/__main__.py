"""Allow running the server with ``python -m taskwarrior_server``."""

from taskwarrior_server.server import run

run()
