"""
Top-level router for the webhook receiver.
"""

from fastapi import APIRouter

from hookify.api.endpoints.webhook import router as webhook_router

api_router = APIRouter()

# Signed deliveries land on /webhook
api_router.include_router(webhook_router)
