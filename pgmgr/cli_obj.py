import click


@click.group()
def cli():
    """pgmgr: program manager back end."""
    ...
