from banzuke_delta.cli.main import app

__all__ = ["app"]
