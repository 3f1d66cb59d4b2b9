from githelper.cli import app

app()
