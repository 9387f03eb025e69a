"""FastAPI integration: bind request query parameters onto a record."""

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from fastapi import HTTPException, Request

from querybind.binding.errors import FieldErrors
from querybind.binding.parse import parse
from querybind.core.config import BindSettings

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


def parse_request(
    request: Request, record: Any, *, settings: BindSettings | None = None
) -> FieldErrors:
    """Bind ``request.query_params`` onto ``record``."""
    return parse(request.query_params, record, settings=settings)


class QueryDependency(Generic[RecordT]):
    """Dependency that builds ``model`` from the query string.

        @router.get("/items")
        async def list_items(query: Listing = Depends(QueryDependency(Listing))): ...

    A non-empty error collection becomes an HTTP error whose detail is
    ``{"errors": {name: [messages]}}``.
    """

    def __init__(
        self,
        model: type[RecordT],
        *,
        settings: BindSettings | None = None,
        status_code: int = 422,
    ) -> None:
        self._model = model
        self._settings = settings
        self._status_code = status_code

    def __call__(self, request: Request) -> RecordT:
        record = self._model()
        errors = parse_request(request, record, settings=self._settings)
        if errors:
            logger.info(
                "Rejected query for %s: %s", self._model.__name__, ", ".join(errors)
            )
            raise HTTPException(status_code=self._status_code, detail={"errors": errors.to_dict()})
        return record
