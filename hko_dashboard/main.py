from hko_dashboard.api.main import app

__all__ = ["app"]
