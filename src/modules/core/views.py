import time
from typing import Any, Dict

import structlog
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

from modules.products.exceptions import DocumentStoreError
from modules.products.repositories import get_product_repository

logger = structlog.get_logger()


def health_check(request: HttpRequest) -> JsonResponse:
    services: Dict[str, Dict[str, Any]] = {}
    overall_healthy = True

    # Check document store
    try:
        start = time.monotonic()
        if not get_product_repository().ping():
            raise DocumentStoreError("Document store did not answer")
        services["document_store"] = {
            "status": "up",
            "response_time_ms": round((time.monotonic() - start) * 1000, 2),
        }
    except DocumentStoreError as exc:
        services["document_store"] = {"status": "down"}
        overall_healthy = False
        logger.error("health_check_document_store_failure", error=str(exc))

    status_code = 200 if overall_healthy else 503

    logger.info(
        "health_check_completed", status="healthy" if overall_healthy else "unhealthy"
    )

    return JsonResponse(
        {
            "status": "healthy" if overall_healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=status_code,
    )
