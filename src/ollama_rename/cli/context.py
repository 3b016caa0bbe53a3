"""Helpers for commands that share state set up by the group callback."""

import click

from ollama_rename.daemon.bootstrap import ensure_running


def require_daemon(ctx: click.Context) -> None:
    """Make sure the daemon is up before a command talks to it.

    Called from each command body, after click has parsed the command's
    own arguments, so `--help` and usage errors never touch the daemon.
    """
    obj = ctx.obj
    ensure_running(obj["client"], obj["binary"], obj["console"])
