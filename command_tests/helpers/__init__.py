from command_tests.helpers.env import TestEnv, make_env
from command_tests.helpers.modules import COMMAND_TEST_MODULES, suffix_from_module
from command_tests.helpers.result import Check, CheckList, CommandReport

__all__ = [
    "TestEnv",
    "make_env",
    "COMMAND_TEST_MODULES",
    "suffix_from_module",
    "Check",
    "CheckList",
    "CommandReport",
]
