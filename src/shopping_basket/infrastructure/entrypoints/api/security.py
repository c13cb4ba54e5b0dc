from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

username_header = APIKeyHeader(name="X-Username", auto_error=False)


async def get_current_username(username: str | None = Security(username_header)) -> str:
    """Username of the caller, as asserted by the authenticating proxy in front of the service."""
    if not username or not username.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Could not validate credentials"
        )
    return username
