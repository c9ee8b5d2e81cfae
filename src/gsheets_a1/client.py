from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from .a1 import RangeNotation, SheetNameNotation, SheetNameRangeNotation, parse_a1_notation
from .codec import Left, Right, decode_either, decode_error, decoder_for
from .models import Credentials, GsheetsError, UpdateValuesResponse, ValueRange
from .types import Dimension, ValueInputOption
from .values_api import ValuesRequest, values_get, values_update

logger = logging.getLogger(__name__)

NotationInput = SheetNameNotation | RangeNotation | SheetNameRangeNotation | str


@runtime_checkable
class SheetsTransport(Protocol):
    """Sends a values request and returns the decoded JSON response body."""

    def send(self, request: ValuesRequest, credentials: Credentials) -> object: ...


class SpreadsheetValues:
    """Reads and writes cell values through an injected transport."""

    def __init__(self, transport: SheetsTransport, credentials: Credentials) -> None:
        self._transport = transport
        self._credentials = credentials

    def get(
        self, spreadsheet_id: str, notation: NotationInput
    ) -> Left[GsheetsError] | Right[ValueRange]:
        """Read the values of one range.

        Raises:
            ParseError: If ``notation`` is text that does not parse.
        """
        request = values_get(spreadsheet_id, _as_notation(notation))
        return decode_either(self._send(request), decode_error, decoder_for(ValueRange))

    def update(
        self,
        spreadsheet_id: str,
        notation: NotationInput,
        values: list[list[str]],
        *,
        value_input_option: ValueInputOption = "RAW",
        major_dimension: Dimension = "ROWS",
    ) -> Left[GsheetsError] | Right[UpdateValuesResponse]:
        """Overwrite one range with ``values``.

        Raises:
            ParseError: If ``notation`` is text that does not parse.
        """
        value_range = ValueRange(
            range=_as_notation(notation),
            major_dimension=major_dimension,
            values=values,
        )
        request = values_update(spreadsheet_id, value_range, value_input_option)
        return decode_either(
            self._send(request), decode_error, decoder_for(UpdateValuesResponse)
        )

    def _send(self, request: ValuesRequest) -> object:
        logger.debug("Sending %s %s", request.method, request.url)
        return self._transport.send(request, self._credentials)


def _as_notation(
    notation: NotationInput,
) -> SheetNameNotation | RangeNotation | SheetNameRangeNotation:
    if isinstance(notation, str):
        return parse_a1_notation(notation)
    return notation
