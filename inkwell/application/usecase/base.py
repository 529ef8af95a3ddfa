"""Shared response base for use cases."""

from pydantic import BaseModel


class BaseResponse(BaseModel):
    """Successful use case result.

    Every response body carries ``ok: true``; failures are rendered with
    ``ok: false`` by the interface layer.
    """

    ok: bool = True
