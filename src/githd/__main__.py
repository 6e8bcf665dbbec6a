from githd.cli import app

app()
