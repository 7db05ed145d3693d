from lodging.handlers.cli import app

app()
