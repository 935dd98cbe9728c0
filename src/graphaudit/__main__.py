from graphaudit.cli import app

app(prog_name="graphaudit")
