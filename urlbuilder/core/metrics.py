from prometheus_client import Counter, Gauge

from urlbuilder.core.config import settings

URLS_BUILT = Counter("urls_built", "Total URLs rendered", ["source"])
URL_PARAMS = Gauge("url_params", "Query parameters in the last rendered URL")

def increment_counter(name: str, labels: dict | None = None):
    if not settings.METRICS_ENABLED:
        return
    if name == "urls_built_total":
        (URLS_BUILT.labels(**(labels or {}))).inc()

def set_gauge(name: str, value: float):
    if not settings.METRICS_ENABLED:
        return
    if name == "url_params":
        URL_PARAMS.set(value)
