# app/security.py
from __future__ import annotations
import hmac
import logging
from typing import Optional

from app.errors import Unauthorized

logger = logging.getLogger(__name__)

ADMIN_SECRET_HEADER = "x-admin-secret-key"
UNAUTHORIZED_MESSAGE = "Unauthorized access. Invalid key."


def check_admin_secret(presented: Optional[str], configured: Optional[str]) -> None:
    """Raise ``Unauthorized`` unless ``presented`` equals the configured secret.

    With no secret configured every write is refused.
    """
    if not configured:
        logger.warning("Write refused: ADMIN_SECRET_KEY is not configured")
        raise Unauthorized(UNAUTHORIZED_MESSAGE)
    if presented is None or not hmac.compare_digest(presented.encode("utf-8"), configured.encode("utf-8")):
        raise Unauthorized(UNAUTHORIZED_MESSAGE)
