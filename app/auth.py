"""API key gate for /matching endpoints."""

from fastapi import HTTPException, Header

from app.config import settings


async def verify_api_key(
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
    authorization: str | None = Header(default=None),
) -> str:
    """Accept the key from X-API-Key or Authorization: Bearer.

    With MATCHING_API_KEY unset every request passes; once set, a missing
    or wrong key is a 401.
    """
    expected = settings.matching_api_key
    if expected is None:
        return ""

    key = x_api_key
    if key is None and authorization and authorization.startswith("Bearer "):
        key = authorization.removeprefix("Bearer ").strip()

    if key != expected:
        raise HTTPException(status_code=401, detail="Invalid or missing API key")

    return key
