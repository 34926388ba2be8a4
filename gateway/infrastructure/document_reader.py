"""
Document readers for JSON, NDJSON and CSV payloads.

Each reader turns a raw payload into a list of JSON objects or raises a
DocumentFormatError describing what is wrong with it.
CSV headers may carry a type suffix (`price:number`); other columns are
kept as strings. Empty CSV cells become null.
"""

import csv
import io
import json
import logging

from gateway.domain.ports import DocumentReaderPort
from gateway.domain.sources.documents import (
    EmptyDocuments,
    MalformedDocuments,
    PayloadType,
)
from gateway.domain.sources.json_body import RECURSION_LIMIT_MESSAGE

logger = logging.getLogger(__name__)

CSV_NUMBER_SUFFIX = ":number"
CSV_STRING_SUFFIX = ":string"


class DocumentReader(DocumentReaderPort):
    """Parses document payloads in memory."""

    def read(self, payload_type: PayloadType, raw: bytes) -> list[dict]:
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            line = raw[: exc.start].count(b"\n") + 1
            raise MalformedDocuments(payload_type, "invalid utf-8", line) from exc
        if not text.strip():
            raise EmptyDocuments(payload_type)

        readers = {
            PayloadType.JSON: self._read_json,
            PayloadType.NDJSON: self._read_ndjson,
            PayloadType.CSV: self._read_csv,
        }
        documents = readers[payload_type](text)
        logger.debug("Read %d %s documents", len(documents), payload_type.value)
        return documents

    def _read_json(self, text: str) -> list[dict]:
        try:
            value = json.loads(text)
        except json.JSONDecodeError as exc:
            raise MalformedDocuments(PayloadType.JSON, exc.msg, exc.lineno) from exc
        except RecursionError as exc:
            raise MalformedDocuments(PayloadType.JSON, RECURSION_LIMIT_MESSAGE) from exc
        if isinstance(value, dict):
            return [value]
        if isinstance(value, list) and all(isinstance(item, dict) for item in value):
            return value
        raise MalformedDocuments(
            PayloadType.JSON, "expected an object or an array of objects"
        )

    def _read_ndjson(self, text: str) -> list[dict]:
        documents = []
        for line_number, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                value = json.loads(line)
            except json.JSONDecodeError as exc:
                raise MalformedDocuments(
                    PayloadType.NDJSON, exc.msg, line_number
                ) from exc
            except RecursionError as exc:
                raise MalformedDocuments(
                    PayloadType.NDJSON, RECURSION_LIMIT_MESSAGE, line_number
                ) from exc
            if not isinstance(value, dict):
                raise MalformedDocuments(
                    PayloadType.NDJSON, "expected an object", line_number
                )
            documents.append(value)
        return documents

    def _read_csv(self, text: str) -> list[dict]:
        reader = csv.reader(io.StringIO(text))
        try:
            header = next(reader)
            columns = [_parse_header(name) for name in header]
            documents = []
            for row in reader:
                if not row:
                    continue
                if len(row) != len(columns):
                    raise MalformedDocuments(
                        PayloadType.CSV,
                        f"expected {len(columns)} fields, found {len(row)}",
                        reader.line_num,
                    )
                documents.append(
                    {
                        name: _convert(value, is_number, reader.line_num)
                        for (name, is_number), value in zip(columns, row)
                    }
                )
        except csv.Error as exc:
            raise MalformedDocuments(
                PayloadType.CSV, str(exc), reader.line_num
            ) from exc
        return documents


def _parse_header(name: str) -> tuple[str, bool]:
    if name.endswith(CSV_NUMBER_SUFFIX):
        return name[: -len(CSV_NUMBER_SUFFIX)], True
    if name.endswith(CSV_STRING_SUFFIX):
        return name[: -len(CSV_STRING_SUFFIX)], False
    return name, False


def _convert(value: str, is_number: bool, line: int) -> str | float | None:
    if value == "":
        return None
    if not is_number:
        return value
    try:
        return float(value)
    except ValueError as exc:
        raise MalformedDocuments(
            PayloadType.CSV, f"`{value}` is not a valid number", line
        ) from exc
