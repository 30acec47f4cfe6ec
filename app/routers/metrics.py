from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.common.metrics import metrics

router = APIRouter(tags=["metrics"])

@router.get("/metrics", response_class=PlainTextResponse)
def read_metrics():
    return metrics.export_prometheus()
