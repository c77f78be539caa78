import logging
from fastapi import APIRouter

from urlbuilder.core.metrics import increment_counter, set_gauge
from urlbuilder.io.schemas import BuildResult, URLSpec

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/urls", tags=["urls"])

@router.post("", response_model=BuildResult)
def build_url(spec: URLSpec):
    ub = spec.to_builder()
    url = ub.build()
    increment_counter("urls_built_total", {"source": "api"})
    set_gauge("url_params", float(len(spec.params)))
    logger.info("Built url with %d params", len(spec.params))
    return BuildResult(url=url, params_count=len(spec.params))
