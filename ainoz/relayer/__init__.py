"""FastAPI relay service answering /v1/generate, /v1/generate/stream and /health."""
from ainoz.relayer.main import app, create_app

__all__ = ["app", "create_app"]
