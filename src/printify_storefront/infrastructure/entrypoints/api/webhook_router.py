import json

from fastapi import APIRouter, Request, status
from fastapi.responses import PlainTextResponse

from printify_storefront.infrastructure.observability.logger_factory_service import get_logger
from printify_storefront.infrastructure.observability.redaction_service import redact_dict, redact_text

logger = get_logger(__name__)
router = APIRouter(prefix="/api/webhooks", tags=["webhooks"])


@router.post("/printify", response_class=PlainTextResponse)
async def receive_printify_webhook(request: Request) -> PlainTextResponse:
    """
    Acknowledges Printify webhook events. Events are only logged; signature
    verification is not performed.
    """
    body_bytes = await request.body()
    try:
        event = json.loads(body_bytes)
    except ValueError:
        logger.warning(
            "Rejected malformed Printify webhook",
            raw_payload=redact_text(body_bytes.decode("utf-8", errors="replace")),
            error_type="ValueError",
        )
        # 400 makes Printify retry the delivery.
        return PlainTextResponse("Bad Request", status_code=status.HTTP_400_BAD_REQUEST)

    logger.info(
        "Received Printify webhook",
        event_type=event.get("type") if isinstance(event, dict) else None,
        payload=redact_dict(event) if isinstance(event, dict) else event,
        tags=["webhook-raw"],
    )
    return PlainTextResponse("OK", status_code=status.HTTP_200_OK)
