"""
Webhook endpoint handler.

This module receives incoming webhook deliveries and authenticates
the raw body against the signature header before acknowledging them.
Unverified payloads are rejected before anything reads their content.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, status

from hookify.core.config import Settings
from hookify.core.security import SignatureValidator, decode_signature

logger = logging.getLogger(__name__)

router = APIRouter(tags=["webhooks"])


def get_app_settings(request: Request) -> Settings:
    """Return the settings the application was created with."""
    return request.app.state.settings


def get_validator(request: Request) -> SignatureValidator:
    """Return the validator built during application startup."""
    validator: SignatureValidator | None = getattr(request.app.state, "validator", None)
    if validator is None:
        logger.error("Signature validator is not initialized")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Webhook receiver is not ready",
        )
    return validator


@router.post(
    "/webhook",
    status_code=status.HTTP_200_OK,
    summary="Webhook Receiver",
    description="Receives webhook deliveries and verifies their signature.",
)
async def handle_webhook(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    validator: SignatureValidator = Depends(get_validator),
) -> dict[str, Any]:
    """
    Handle an incoming webhook delivery.

    The signature is read from the configured header, decoded from its
    transport encoding and checked against the raw body bytes.

    Args:
        request: The FastAPI request object.
        settings: Application settings.
        validator: The shared signature validator.

    Returns:
        dict: Response acknowledging the delivery.

    Raises:
        HTTPException: 401 if signature validation fails.
    """
    # Read raw body for signature verification
    payload = await request.body()

    header_value = request.headers.get(settings.signature_header)
    received_signature = decode_signature(header_value, settings.signature_encoding)

    if not validator.verify(payload, received_signature):
        reason = "missing" if header_value is None else "invalid"
        logger.warning(
            f"Rejected webhook with {reason} {settings.signature_header} header "
            f"from {request.client.host if request.client else 'unknown'}"
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid webhook signature",
        )

    logger.info(f"Accepted webhook delivery: size={len(payload)}")

    return {
        "status": "accepted",
        "size": len(payload),
    }
