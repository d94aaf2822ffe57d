import importlib

importlib.import_module("pgmgr.cli_routes.host")
importlib.import_module("pgmgr.cli_routes.library")

from pgmgr.cli_obj import cli

if __name__ == "__main__":
    cli()
