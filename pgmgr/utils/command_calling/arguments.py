from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Sequence


# -------------------------
# Errors
# -------------------------

class CommandValidationError(Exception):
    """Base class for command arg validation errors."""


class MissingOrExtraArgumentsError(CommandValidationError):
    """Raised when required args are missing and/or undeclared args are present.

    Missing is computed relative to `required`. Extra is computed relative to
    the schema `properties` keys, and only when additionalProperties is False.
    """

    def __init__(
        self,
        command_name: str,
        provided: Sequence[str],
        required_arguments: Sequence[str],
        allowed_arguments: Sequence[str],
        additional_fields_permitted: bool,
    ):
        self.command_name = command_name
        self.provided = list(provided)
        self.required_arguments = list(required_arguments)
        self.allowed_arguments = list(allowed_arguments)
        self.additional_fields_permitted = additional_fields_permitted

        provided_set = set(self.provided)
        allowed_set = set(self.allowed_arguments)

        self.missing = [a for a in self.required_arguments if a not in provided_set]
        if self.additional_fields_permitted:
            self.extra = []
        else:
            self.extra = [a for a in self.provided if a not in allowed_set]

        super().__init__(str(self))

    def __str__(self) -> str:
        parts = [f"{self.command_name}: invalid arguments"]
        if self.missing:
            parts.append(f"missing: {', '.join(self.missing)}")
        if self.extra:
            parts.append(f"unexpected: {', '.join(self.extra)}")
        return "; ".join(parts)


class InvalidTypeError(CommandValidationError):
    def __init__(self, command_name: str, path: str, expected: str, got: str):
        self.command_name = command_name
        self.path = path
        self.expected = expected
        self.got = got
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"{self.command_name}: {self.path}: expected {self.expected}, got {self.got}"


@dataclass(frozen=True)
class ValidationIssue:
    path: str
    message: str


class AggregateCommandValidationError(CommandValidationError):
    def __init__(self, command_name: str, issues: Sequence[ValidationIssue]):
        self.command_name = command_name
        self.issues = list(issues)
        super().__init__(str(self))

    def __str__(self) -> str:
        lines = [f"{self.command_name}: validation failed with {len(self.issues)} issue(s):"]
        lines += [f"  - {i.path}: {i.message}" for i in self.issues]
        return "\n".join(lines)


# -------------------------
# Validator (partial JSON Schema)
# -------------------------

_JSON_TYPE_MAP = {
    "string": str,
    "integer": int,
    "number": (int, float),
    "boolean": bool,
    "object": dict,
    "array": list,
    "null": type(None),
}


def command_name_from_def(command_def: Mapping[str, Any]) -> str:
    if "function" in command_def:
        return command_def.get("function", {}).get("name", "<unknown-command>")
    return command_def.get("name", "<unknown-command>")


def _params_from_def(command_def: Mapping[str, Any]) -> Mapping[str, Any]:
    if "function" in command_def:
        return command_def.get("function", {}).get("parameters", {}) or {}
    return command_def.get("parameters", {}) or {}


def validate_command_args(command_def: Mapping[str, Any], args: Any) -> None:
    """Validate command args against the definition's `parameters` schema.

    Raises CommandValidationError on failure.
    """
    command_name = command_name_from_def(command_def)
    params = _params_from_def(command_def)

    if params.get("type") != "object":
        raise CommandValidationError(f"{command_name}: parameters.type must be 'object'")

    if not isinstance(args, Mapping):
        raise InvalidTypeError(command_name, "$", "object", type(args).__name__)

    properties: dict[str, Any] = params.get("properties", {}) or {}
    required: list[str] = list(params.get("required", []) or [])
    additional_fields_permitted = params.get("additionalProperties", True) is not False

    err = MissingOrExtraArgumentsError(
        command_name=command_name,
        provided=list(args.keys()),
        required_arguments=required,
        allowed_arguments=list(properties.keys()),
        additional_fields_permitted=additional_fields_permitted,
    )
    if err.missing or err.extra:
        raise err

    issues: list[ValidationIssue] = []
    for key, schema in properties.items():
        if key in args:
            _validate_value(f"$.{key}", args[key], schema, issues)

    if issues:
        raise AggregateCommandValidationError(command_name, issues)


def _type_matches(expected_type: str, value: Any) -> bool:
    # bool is a subclass of int; neither integer nor number accepts it
    if expected_type in ("integer", "number") and isinstance(value, bool):
        return False
    return isinstance(value, _JSON_TYPE_MAP[expected_type])


def _validate_value(
    path: str,
    value: Any,
    schema: Mapping[str, Any],
    issues: list[ValidationIssue],
) -> None:
    expected_type = schema.get("type")
    if expected_type in _JSON_TYPE_MAP and not _type_matches(expected_type, value):
        issues.append(ValidationIssue(path, f"expected {expected_type}, got {type(value).__name__}"))
        return

    if "enum" in schema and value not in schema["enum"]:
        issues.append(ValidationIssue(path, f"value must be one of {list(schema['enum'])!r}"))
        return

    if expected_type == "string":
        min_len = schema.get("minLength")
        if isinstance(min_len, int) and len(value) < min_len:
            issues.append(ValidationIssue(path, f"minLength {min_len} violated"))
        max_len = schema.get("maxLength")
        if isinstance(max_len, int) and len(value) > max_len:
            issues.append(ValidationIssue(path, f"maxLength {max_len} violated"))
        pat = schema.get("pattern")
        if isinstance(pat, str):
            try:
                if re.search(pat, value) is None:
                    issues.append(ValidationIssue(path, f"pattern {pat!r} did not match"))
            except re.error:
                issues.append(ValidationIssue(path, "invalid schema regex pattern"))
