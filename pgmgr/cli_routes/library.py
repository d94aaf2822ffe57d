from __future__ import annotations

import sys

import click
from termcolor import colored

from pgmgr.cli_obj import cli
from pgmgr.commands import CommandResult, build_registry
from pgmgr.library import load_config


@cli.group()
def library():
    """Manage programs and versions under the local storage path."""
    ...


def _fail(result: CommandResult) -> None:
    click.echo(colored(f"Error ({result.kind}): {result.error}", "red"), err=True)
    sys.exit(1)


def _run(name: str, args: dict) -> CommandResult:
    result = build_registry().execute(name, args)
    if not result.ok:
        _fail(result)
    return result


def _echo_tree(nodes: list[dict], level: int) -> None:
    for node in nodes:
        indent = "  " * level
        if node["isDirectory"]:
            click.echo(f"{indent}{node['name']}/")
            _echo_tree(node.get("children") or [], level + 1)
        else:
            click.echo(f"{indent}{node['name']}")


@library.command(name="list")
@click.option("--modules", is_flag=True, default=False, help="Also print each version's file tree.")
def library_list(modules):
    """List programs and their versions."""
    result = _run("list_programs", {})
    if not result.value:
        click.echo(f"No programs under {load_config().local_path}")
        return
    for program in result.value:
        click.echo(colored(program["name"], "cyan", attrs=["bold"]))
        for version in program["versions"]:
            click.echo(f"  {version['version']}")
            if modules:
                _echo_tree(version["modules"], 2)


@library.command(name="add-program")
@click.argument("name")
def library_add_program(name):
    result = _run("create_program", {"name": name})
    click.echo(f"Program created: {result.value}")


@library.command(name="add-version")
@click.argument("program")
@click.argument("version")
def library_add_version(program, version):
    result = _run("create_version", {"program": program, "version": version})
    click.echo(f"Version created: {result.value}")


@library.command(name="delete-version")
@click.argument("program")
@click.argument("version")
@click.option("--yes", is_flag=True, default=False, help="Skip the confirmation prompt.")
def library_delete_version(program, version, yes):
    """Recursively delete a version directory."""
    if not yes:
        click.confirm(f"Delete version {version} of {program}?", abort=True)
    result = _run("delete_version", {"program": program, "version": version})
    click.echo(f"Version deleted: {result.value}")


@library.group(name="config")
def library_config():
    """Show or change the saved application config."""
    ...


@library_config.command(name="show")
def library_config_show():
    result = _run("get_config", {})
    click.echo(f"Local Storage Path: {result.value['localPath']}")
    click.echo(f"Mirror Drive Path:  {result.value['mirrorPath'] or '(none)'}")


@library_config.command(name="set")
@click.option("--local-path", default=None, help="Directory holding one subdirectory per program.")
@click.option("--mirror-path", default=None, help="Mirror drive path.")
def library_config_set(local_path, mirror_path):
    args = {}
    if local_path is not None:
        args["localPath"] = local_path
    if mirror_path is not None:
        args["mirrorPath"] = mirror_path
    if not args:
        raise click.UsageError("Nothing to set: pass --local-path and/or --mirror-path.")
    result = _run("set_config", args)
    click.echo(f"Local Storage Path: {result.value['localPath']}")
    click.echo(f"Mirror Drive Path:  {result.value['mirrorPath'] or '(none)'}")
