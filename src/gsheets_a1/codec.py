"""JSON boundary for the Sheets values API payloads."""

from __future__ import annotations

from collections.abc import Callable
import json
import logging
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import DecodingFailure
from .models import GsheetsError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)
L = TypeVar("L")
R = TypeVar("R")

Decoder = Callable[[object], R]

FALLBACK_ERROR_CODE = 400


class Left(BaseModel, Generic[L]):
    """Left side of a decoded either (the error envelope)."""

    model_config = ConfigDict(frozen=True)

    value: L


class Right(BaseModel, Generic[R]):
    """Right side of a decoded either (the success payload)."""

    model_config = ConfigDict(frozen=True)

    value: R


def decode(model: type[ModelT], payload: object) -> ModelT:
    """Decode a JSON value (or JSON text) into ``model``.

    Args:
        model: Target pydantic model.
        payload: Parsed JSON value, or raw JSON text/bytes.

    Returns:
        Validated model instance.

    Raises:
        DecodingFailure: If the payload does not fit the model, including
            A1 notation fields that fail to parse.
    """
    try:
        if isinstance(payload, (str, bytes, bytearray)):
            return model.model_validate_json(payload)
        return model.model_validate(payload)
    except ValidationError as exc:
        raise _decoding_failure(model, exc) from exc


def decoder_for(model: type[ModelT]) -> Decoder[ModelT]:
    """Return a one-argument decoder bound to ``model``."""

    def run(payload: object) -> ModelT:
        return decode(model, payload)

    return run


def encode(model: BaseModel) -> dict[str, Any]:
    """Encode a model into JSON-ready data using API field names."""
    return model.model_dump(mode="json", by_alias=True)


def decode_error(payload: object) -> GsheetsError:
    """Decode the ``error`` envelope of an API response.

    Never raises: a payload that does not carry a well-formed ``error``
    object yields a generic 400 error whose message holds the raw JSON.
    """
    try:
        data = json.loads(payload) if isinstance(payload, (str, bytes, bytearray)) else payload
        return GsheetsError.model_validate(data["error"])  # type: ignore[index]
    except (ValueError, TypeError, KeyError, IndexError) as exc:
        message = (
            f"Unexpected error payload, raw json {_raw_json(payload)}. "
            "Have you added a row to the sheet? If not, please add one."
        )
        logger.error("Error envelope decode failed (%s): %s", exc, message)
        return GsheetsError(code=FALLBACK_ERROR_CODE, message=message, status="")


def decode_either(
    payload: object, left: Decoder[L], right: Decoder[R]
) -> Left[L] | Right[R]:
    """Decode ``payload`` as ``right``, falling back to ``left``.

    Raises:
        DecodingFailure: If neither decoder accepts the payload; the
            failure reported is the one from ``left``.
    """
    try:
        return Right(value=right(payload))
    except DecodingFailure as exc:
        logger.debug("Payload is not a success response: %s", exc)
    return Left(value=left(payload))


def _decoding_failure(model: type[BaseModel], exc: ValidationError) -> DecodingFailure:
    errors = exc.errors(include_url=False)
    first = errors[0] if errors else {"msg": str(exc), "loc": ()}
    return DecodingFailure(
        f"{model.__name__}: {first['msg']}",
        history=tuple(first.get("loc", ())),
        cause=exc,
    )


def _raw_json(payload: object) -> str:
    if isinstance(payload, str):
        return payload
    if isinstance(payload, (bytes, bytearray)):
        return bytes(payload).decode("utf-8", errors="replace")
    try:
        return json.dumps(payload, separators=(",", ":"), default=str)
    except (TypeError, ValueError):
        return repr(payload)
