# app/core/response.py

from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

SUCCESS = "success"
FAILED = "failed"


def write_json(status_code: int, status_text: str, message: str, data: Any = None) -> JSONResponse:
    """
    Serialize the uniform envelope {status, message, data}.
    `data` is left out of the body when there is nothing to return.
    """
    body = {
        "status": status_text,
        "message": message,
    }

    if data is not None:
        body["data"] = jsonable_encoder(data)

    return JSONResponse(status_code=status_code, content=body)


def success(message: str, data: Any = None, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return write_json(status_code, SUCCESS, message, data)


def failed(status_code: int, message: str) -> JSONResponse:
    return write_json(status_code, FAILED, message)
