from __future__ import annotations

import os
import traceback
from dataclasses import dataclass
from types import ModuleType
from typing import Any, Optional

from pgmgr.commands import create_program
from pgmgr.commands import create_version
from pgmgr.commands import delete_version
from pgmgr.commands import get_config
from pgmgr.commands import list_programs
from pgmgr.commands import read_dir_tree
from pgmgr.commands import remove_dir_all
from pgmgr.commands import set_config
from pgmgr.utils.command_calling.arguments import (
    CommandValidationError,
    command_name_from_def,
    validate_command_args,
)
from pgmgr.utils.exceptions import CommandError
from pgmgr.utils.log import log

BUILTIN_COMMANDS: list[ModuleType] = [
    remove_dir_all,
    get_config,
    set_config,
    list_programs,
    read_dir_tree,
    create_program,
    create_version,
    delete_version,
]


@dataclass
class CommandResult:
    ok: bool
    value: Any = None
    error: Optional[str] = None
    kind: Optional[str] = None

    @classmethod
    def success(cls, value: Any = None) -> "CommandResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, kind: str, error: str) -> "CommandResult":
        return cls(ok=False, error=error, kind=kind)

    def to_dict(self) -> dict:
        return {"ok": self.ok, "value": self.value, "error": self.error, "kind": self.kind}


class CommandRegistry:
    """Name -> command module dispatch table handed to each host at startup."""

    def __init__(self) -> None:
        self._commands: dict[str, ModuleType] = {}

    def register(self, module: ModuleType) -> None:
        if not hasattr(module, "DEFINITION") or not hasattr(module, "execute"):
            raise ValueError(f"{module.__name__} must define DEFINITION and execute")
        name = command_name_from_def(module.DEFINITION)
        if name in self._commands:
            raise ValueError(f"Command {name!r} is already registered")
        self._commands[name] = module

    def names(self) -> list[str]:
        return sorted(self._commands)

    def definitions(self) -> list[dict]:
        return [self._commands[n].DEFINITION for n in self.names()]

    def get(self, name: str) -> Optional[ModuleType]:
        return self._commands.get(name)

    def execute(self, name: str, args: Any) -> CommandResult:
        """Run one command. Never raises: every failure becomes a CommandResult."""
        module = self._commands.get(name)
        if module is None:
            log(f"[command] {name}: unknown command")
            return CommandResult.failure("unknown_command", f"Unknown command: {name!r}")
        try:
            validate_command_args(module.DEFINITION, args)
            result = CommandResult.success(module.execute(args))
        except CommandValidationError as e:
            result = CommandResult.failure("invalid_arguments", str(e))
        except CommandError as e:
            result = CommandResult.failure(e.kind, str(e))
        except Exception as e:
            if os.environ.get("PGMGR_COMMAND_TRACEBACKS") == "1":
                message = f"Failed to execute command {name}:\n{traceback.format_exc()}".rstrip()
            else:
                message = f"Failed to execute command {name}:\n{e}"
            result = CommandResult.failure("internal", message)

        if result.ok:
            log(f"[command] {name}: ok")
        else:
            log(f"[command] {name}: {result.kind}: {result.error}")
        return result


def build_registry(modules: Optional[list[ModuleType]] = None) -> CommandRegistry:
    registry = CommandRegistry()
    for module in BUILTIN_COMMANDS if modules is None else modules:
        registry.register(module)
    return registry
