from typing import Any, Literal, Optional, Union

import requests
from pydantic import BaseModel


class Ok(BaseModel):
    kind: Literal["ok"] = "ok"
    status: int
    payload: Any = None


class LogicalFailure(BaseModel):
    """A 2xx response whose body says the operation did not happen."""

    kind: Literal["logical_failure"] = "logical_failure"
    status: int
    message: str
    payload: Any = None


class TransportFailure(BaseModel):
    kind: Literal["transport_failure"] = "transport_failure"
    status: int
    body: Any = None


ApiResult = Union[Ok, LogicalFailure, TransportFailure]


def is_success(status: int) -> bool:
    return 200 <= status < 300


def parse_body(response: requests.Response) -> Any:
    """JSON body when there is one, otherwise the raw text ("" for 204)."""
    if not response.content:
        return ""
    try:
        return response.json()
    except ValueError:
        return response.text


def failure_message(body: Any) -> Optional[str]:
    """
    Pick the failure message out of a 2xx body, if the body reports one.

    The account service has two envelopes for this: GenerateToken answers
    ``{"status": "Failed", "result": ...}`` and the user endpoints answer
    ``{"code": ..., "message": ...}``.
    """
    if not isinstance(body, dict):
        return None
    if body.get("status") == "Failed":
        return body.get("result") or "Failed"
    if "code" in body and "message" in body:
        return body["message"]
    return None


def classify_response(response: requests.Response) -> ApiResult:
    body = parse_body(response)
    if not is_success(response.status_code):
        return TransportFailure(status=response.status_code, body=body)

    message = failure_message(body)
    if message is not None:
        return LogicalFailure(status=response.status_code, message=message, payload=body)
    return Ok(status=response.status_code, payload=body)
