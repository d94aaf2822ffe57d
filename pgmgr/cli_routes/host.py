from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from termcolor import colored

from pgmgr.cli_obj import cli
from pgmgr.commands import build_registry
from pgmgr.utils.process import ManagedProcess, run_processes

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


@cli.group()
def host():
    """Commands for the host bridge and direct command invocation."""
    ...


@host.command(name="commands")
def host_commands():
    """List every registered command."""
    registry = build_registry()
    for definition in registry.definitions():
        fn = definition["function"]
        # pad before colouring; escape codes would count toward the width
        name = f"{fn['name']:<30}"
        click.echo(f"{colored(name, 'cyan')} {fn['description']}")


def _parse_args(arg_pairs: tuple[str, ...], json_args: str | None) -> dict:
    args: dict = {}
    if json_args:
        try:
            parsed = json.loads(json_args)
        except ValueError as e:
            raise click.BadParameter(f"not valid JSON: {e}", param_hint="--json-args")
        if not isinstance(parsed, dict):
            raise click.BadParameter("must be a JSON object", param_hint="--json-args")
        args.update(parsed)
    for pair in arg_pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {pair!r}", param_hint="--arg")
        args[key] = value
    return args


@host.command(name="invoke")
@click.argument("name")
@click.option("--arg", "arg_pairs", multiple=True, help="String argument as key=value. Repeatable.")
@click.option("--json-args", default=None, help="Arguments as a JSON object; --arg values override it.")
def host_invoke(name, arg_pairs, json_args):
    """
    Run one command in-process and print its result as JSON.

    Exits with status 1 when the command fails.
    """
    args = _parse_args(arg_pairs, json_args)
    result = build_registry().execute(name, args)
    click.echo(json.dumps(result.to_dict(), indent=2))
    if not result.ok:
        sys.exit(1)


@host.command(name="run")
@click.option(
    "--port", default=None, type=int,
    help="Port for the host bridge. Defaults to PGMGR_PORT from the environment or .env, else 5000.",
)
@click.option(
    "--with-logging-server", is_flag=True, default=False,
    help="Also start logging_server.py and forward its output.",
)
@click.option(
    "--command-tracebacks", is_flag=True, default=False,
    help="When a command raises an unexpected exception, return the full traceback instead of just the message.",
)
def host_run(port, with_logging_server, command_tracebacks):
    """
    Start the host bridge (and optionally the logging server) as child
    processes, forwarding both streams to stdout.
    """
    bridge_env = {}
    if port is not None:
        bridge_env["PGMGR_PORT"] = str(port)
    if command_tracebacks:
        bridge_env["PGMGR_COMMAND_TRACEBACKS"] = "1"

    processes = []
    if with_logging_server:
        processes.append(
            ManagedProcess(
                label="logging",
                cmd=[sys.executable, str(PROJECT_ROOT / "logging_server.py")],
                cwd=PROJECT_ROOT,
            )
        )
    processes.append(
        ManagedProcess(
            label="host",
            cmd=[sys.executable, "-m", "pgmgr.host.main"],
            cwd=PROJECT_ROOT,
            env=bridge_env or None,
        )
    )

    click.echo("[pgmgr] Starting host processes. Press Ctrl+C to stop.")
    try:
        run_processes(processes)
    except KeyboardInterrupt:
        click.echo("[pgmgr] Stopped.")
