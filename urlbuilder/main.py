from fastapi import FastAPI
from prometheus_client import make_asgi_app
from urlbuilder.api.routes import urls as urls_routes
from urlbuilder.core.config import settings
from urlbuilder.core.logging import setup_logging

setup_logging(settings.LOG_LEVEL)

app = FastAPI(title="URLBuilder API", version="0.1.0")

app.include_router(urls_routes.router)

if settings.METRICS_ENABLED:
    app.mount("/metrics", make_asgi_app())

@app.get("/healthz")
def healthz():
    return {"status": "ok", "env": settings.ENV}
