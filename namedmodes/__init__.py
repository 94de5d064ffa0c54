"""
Named modes - view and change channel modes by long name.

PROP lets users address channel modes by name ("+key secret") instead of
letter. Named changes can also travel through a placeholder mode letter as
"<name>[=<value>]"; a pre-mode hook that runs before every other observer
rewrites those into changes on the real modes.

Usage:
    from namedmodes import Server, NamedModesModule

    server = Server()
    server.load_module(NamedModesModule())
"""

from namedmodes.module import Module, NamedModesModule
from namedmodes.server import Server, parse_line

__version__ = "1.0.0"

__all__ = [
    "Module",
    "NamedModesModule",
    "Server",
    "parse_line",
]
