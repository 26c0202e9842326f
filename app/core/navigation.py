"""
Routing decisions returned by page loaders and auth handlers.

A loader either lets the request continue (optionally with data for the page)
or asks for a redirect. The decision is turned into an HTTP response at the
edge (middleware or route), never raised as an exception.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Union

from fastapi import status
from fastapi.responses import RedirectResponse

NO_STORE_HEADERS = {"Cache-Control": "private, no-store"}


@dataclass(frozen=True)
class Continue:
    data: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RedirectTo:
    location: str
    status_code: int = status.HTTP_303_SEE_OTHER

    def to_response(self) -> RedirectResponse:
        return RedirectResponse(url=self.location, status_code=self.status_code, headers=NO_STORE_HEADERS)


Decision = Union[Continue, RedirectTo]
