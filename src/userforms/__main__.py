from userforms.cli import app

app()
