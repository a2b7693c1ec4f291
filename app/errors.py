# app/errors.py
from __future__ import annotations
from typing import Optional


class CatalogError(Exception):
    """Base for errors that map onto an HTTP response."""
    status_code: int = 500

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class Unauthorized(CatalogError):
    status_code = 401


class BadRequest(CatalogError):
    status_code = 400


class InternalError(CatalogError):
    """Store or connectivity failure. ``detail`` holds the underlying error text."""
    status_code = 500
