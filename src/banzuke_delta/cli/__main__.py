from banzuke_delta.cli.main import app

app()
