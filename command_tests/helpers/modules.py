from __future__ import annotations

COMMAND_TEST_MODULES = [
    "command_tests.individual.test_remove_dir_all",
    "command_tests.individual.test_config",
    "command_tests.individual.test_create_program",
    "command_tests.individual.test_create_version",
    "command_tests.individual.test_list_programs",
    "command_tests.individual.test_read_dir_tree",
    "command_tests.individual.test_delete_version",
]


def suffix_from_module(module_path: str) -> str:
    """'command_tests.individual.test_foo' -> 'foo'."""
    stem = module_path.rsplit(".", 1)[-1]
    return stem[5:] if stem.startswith("test_") else stem
