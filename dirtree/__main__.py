from dirtree.cli.app import app

app()
