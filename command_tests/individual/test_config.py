from __future__ import annotations
from command_tests.helpers import CheckList
from command_tests.helpers.env import TestEnv

def run(env: TestEnv):
    cl = CheckList("get_config / set_config")
    try:
        r = env.registry.execute("get_config", {})
        cl.check("get", "Returns the saved local path", r.ok and r.value["localPath"] == env.local_path, f"got: {r!r}")

        r2 = env.registry.execute("set_config", {"mirrorPath": "/mnt/mirror"})
        cl.check("set partial", "Omitted fields keep their saved value", r2.ok and r2.value == {"localPath": env.local_path, "mirrorPath": "/mnt/mirror"}, f"got: {r2!r}")

        r3 = env.registry.execute("get_config", {})
        cl.check("persisted", "New value is read back", r3.ok and r3.value["mirrorPath"] == "/mnt/mirror", f"got: {r3!r}")

        r4 = env.registry.execute("set_config", {"localPath": 5})
        cl.check("bad type", "Non-string path fails validation", not r4.ok and r4.kind == "invalid_arguments", f"got: {r4!r}")
    except Exception as e:
        cl.record_exception(e)
    return cl.result()
