import asyncio

import pytest
from fastapi import HTTPException

from shopping_basket.infrastructure.entrypoints.api.security import get_current_username


def test_returns_username_from_header():
    assert asyncio.run(get_current_username("alice")) == "alice"


@pytest.mark.parametrize("header", [None, "", "   "])
def test_rejects_missing_username(header):
    with pytest.raises(HTTPException) as exc:
        asyncio.run(get_current_username(header))

    assert exc.value.status_code == 401
