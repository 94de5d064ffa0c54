"""
Tests for namedmodes/cli.py

Tests cover:
- Argument parsing
- Server construction from config
- The line loop
"""

import io
from pathlib import Path

from namedmodes.channels import LocalUser
from namedmodes.cli import build_parser, build_server, run
from namedmodes.modes import ModeType


class TestArgumentParsing:
    """Test the argument parser."""

    def test_defaults(self):
        args = build_parser().parse_args([])

        assert args.config is None
        assert args.env_file == Path(".env")
        assert args.nick == "console"
        assert args.channel == []
        assert args.priv == []

    def test_repeatable_options(self):
        args = build_parser().parse_args(
            ["--nick", "alice", "--channel", "#a", "--channel", "#b", "--priv", "channels/auspex"]
        )

        assert args.nick == "alice"
        assert args.channel == ["#a", "#b"]
        assert args.priv == ["channels/auspex"]


class TestBuildServer:
    """Test server construction."""

    def test_loads_module_with_configured_letter(self, tmp_path, restore_root_logger):
        config = tmp_path / "namedmodes.yaml"
        config.write_text("namedmodes:\n  placeholder_letter: Y\nlogging:\n  level: WARNING\n")
        args = build_parser().parse_args(
            ["--config", str(config), "--env-file", str(tmp_path / "missing.env")]
        )

        server = build_server(args)

        assert server.commands.get_command("PROP") is not None
        assert server.registry.find_mode_by_letter("Y", ModeType.CHANNEL).name == "namebase"


class TestRun:
    """Test the line loop."""

    def test_processes_lines_and_writes_replies(self, server):
        user = LocalUser("alice")
        server.channels.create("#test").add_user(user, is_op=True)
        stdin = io.StringIO("PROP #test +secret\n\nPROP #test\n")
        stdout = io.StringIO()

        handled = run(server, user, stdin, stdout)

        assert handled == 2
        assert stdout.getvalue().splitlines() == [
            ":irc.example.net 961 alice #test +secret",
            ":irc.example.net 960 alice #test :End of mode list",
        ]

    def test_errors_are_written(self, server):
        user = LocalUser("alice")
        stdout = io.StringIO()

        run(server, user, io.StringIO("PROP #nowhere\n"), stdout)

        assert stdout.getvalue() == ":irc.example.net 401 alice #nowhere :No such nick/channel\n"
