from __future__ import annotations
import os
from command_tests.helpers import CheckList
from command_tests.helpers.env import TestEnv

def run(env: TestEnv):
    cl = CheckList("create_version")
    try:
        r = env.registry.execute("create_version", {"program": "editor", "version": "1.0.0"})
        expected = os.path.join(env.local_path, "editor", "1.0.0")
        cl.check("create result", "Returns the new version path", r.ok and r.value == expected, f"got: {r!r}")
        cl.check("dir exists", "Version directory exists, program created with it", os.path.isdir(expected), f"path: {expected!r}")

        r2 = env.registry.execute("create_version", {"program": "editor"})
        cl.check("missing version", "Missing argument fails validation", not r2.ok and r2.kind == "invalid_arguments", f"got: {r2!r}")
    except Exception as e:
        cl.record_exception(e)
    return cl.result()
