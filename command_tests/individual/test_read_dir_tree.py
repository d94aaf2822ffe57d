from __future__ import annotations
import os
from command_tests.helpers import CheckList
from command_tests.helpers.env import TestEnv

def run(env: TestEnv):
    cl = CheckList("read_dir_tree")
    try:
        root = os.path.join(env.tmp_dir, "tree")
        os.makedirs(os.path.join(root, "src"))
        for name in ("b.txt", "A.txt", os.path.join("src", "main.py")):
            with open(os.path.join(root, name), "w", encoding="utf-8") as f:
                f.write("x")
        r = env.registry.execute("read_dir_tree", {"path": root})
        names = [n["name"] for n in r.value] if r.ok else []
        cl.check("ordering", "Directories first, then case-insensitive names", names == ["src", "A.txt", "b.txt"], f"got: {names!r}")
        children = [c["name"] for c in r.value[0].get("children", [])] if names else []
        cl.check("children", "Subdirectory children are included", children == ["main.py"], f"got: {children!r}")

        r2 = env.registry.execute("read_dir_tree", {"path": os.path.join(env.tmp_dir, "missing")})
        cl.check("missing root", "Unreadable root yields an empty list", r2.ok and r2.value == [], f"got: {r2!r}")
    except Exception as e:
        cl.record_exception(e)
    return cl.result()
