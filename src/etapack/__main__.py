from etapack.cli import app

app()
