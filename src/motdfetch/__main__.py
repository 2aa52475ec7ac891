from motdfetch.cli import app

app(prog_name="motdfetch")
