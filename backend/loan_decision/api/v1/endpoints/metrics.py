"""Prometheus Metrics Endpoint.

Exposes service metrics in Prometheus format.
"""

from fastapi import APIRouter, Response

from ....core.constants import Metrics
from ....core.metrics import get_content_type, get_metrics

router = APIRouter()


@router.get(Metrics.ENDPOINT_PATH)
async def prometheus_metrics():
    """Expose Prometheus metrics.

    This endpoint is scraped by Prometheus server to collect metrics.
    Returns metrics in Prometheus text format.
    """
    return Response(
        content=get_metrics(),
        media_type=get_content_type()
    )
