"""Responses of the diffy.org paste service"""

from __future__ import annotations

import json
from typing import Any, Literal, Union

from pydantic import BaseModel


class DiffyCreated(BaseModel):
    kind: Literal["created"] = "created"
    id: str


class DiffyError(BaseModel):
    kind: Literal["error"] = "error"
    error: str


class DiffyUnrecognized(BaseModel):
    """Body that is neither a created diff nor an API error"""

    kind: Literal["unrecognized"] = "unrecognized"
    body: Any = None

    def describe(self) -> str:
        if isinstance(self.body, str):
            return self.body
        return json.dumps(self.body, indent=2)


DiffyResponse = Union[DiffyCreated, DiffyError, DiffyUnrecognized]


def decode_diffy_response(body: Any) -> DiffyResponse:
    """Classify a decoded response body"""
    if isinstance(body, dict):
        if body.get("id") is not None:
            return DiffyCreated(id=str(body["id"]))
        if body.get("error") is not None:
            return DiffyError(error=str(body["error"]))
    return DiffyUnrecognized(body=body)
