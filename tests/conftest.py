"""
Named Modes Test Configuration

Central pytest configuration and shared fixtures for all tests.
"""

import logging
import os
import sys

# Add project root to path FIRST
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from namedmodes import NamedModesModule, Server
from namedmodes.channels import LocalUser
from namedmodes.config import NamedModesConfig
from namedmodes.modes import ModeRegistry, ModeType, register_builtin_modes


# Registry with only the builtin modes
@pytest.fixture
def registry():
    registry = ModeRegistry()
    register_builtin_modes(registry)
    return registry


@pytest.fixture
def settings():
    return NamedModesConfig()


# Server with the named modes module loaded
@pytest.fixture
def module(settings):
    return NamedModesModule(settings)


@pytest.fixture
def server(module):
    server = Server()
    server.load_module(module)
    return server


@pytest.fixture
def placeholder(server):
    return server.registry.find_mode_by_letter("Z", ModeType.CHANNEL)


# Users: alice is an operator of #test, bob is not on it, oper holds auspex
@pytest.fixture
def alice():
    return LocalUser("alice")


@pytest.fixture
def bob():
    return LocalUser("bob")


@pytest.fixture
def oper():
    return LocalUser("oper", privileges={"channels/auspex"})


@pytest.fixture
def channel(server, alice):
    channel = server.channels.create("#test")
    channel.add_user(alice, is_op=True)
    return channel


# Keep handler changes made by setup_logging() out of other tests
@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
