"""Pydantic models for authentication."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class CredentialsRequest(BaseModel):
    # Optional so blank or missing fields reach the identity service and get a 400.
    username: Optional[str] = None
    password: Optional[str] = None


class AccountResponse(BaseModel):
    ok: bool = True
    username: str
