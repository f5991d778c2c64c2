"""Authentication API routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request

from lobby.exceptions import InvalidCredentials, InvalidInput, UsernameTaken
from server.auth.identity import IdentityService
from server.auth.models import AccountResponse, CredentialsRequest

router = APIRouter(tags=["auth"])


def get_identity(request: Request) -> IdentityService:
    """FastAPI dependency: the identity service configured on the app."""
    return request.app.state.identity


@router.post("/signup", response_model=AccountResponse)
def signup(body: CredentialsRequest, identity: IdentityService = Depends(get_identity)):
    try:
        username = identity.create_account(body.username, body.password)
    except InvalidInput as exc:
        raise HTTPException(400, str(exc))
    except UsernameTaken:
        raise HTTPException(409, "username already taken")
    return AccountResponse(username=username)


@router.post("/login", response_model=AccountResponse)
def login(body: CredentialsRequest, identity: IdentityService = Depends(get_identity)):
    try:
        username = identity.authenticate(body.username, body.password)
    except InvalidInput as exc:
        raise HTTPException(400, str(exc))
    except InvalidCredentials:
        raise HTTPException(401, "invalid credentials")
    return AccountResponse(username=username)
