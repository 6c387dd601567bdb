# csv_normalizer.py
"""
CSV parsing and normalization to our NormalizedRecord schema.

Responsibilities:
- Read the whole export (bytes) into memory as CSV rows.
- Skip the header row(s) without looking at them.
- Run the exchange's parser on every remaining row, returning
  (valid_records, errors) so one bad row never stops the batch.
- Write normalized records back out as CSV.

This module is "pure" apart from logging: bytes in, typed objects out.
"""

from __future__ import annotations

import csv
from io import BytesIO, TextIOWrapper
from typing import Iterable, List, Mapping, TextIO, Tuple

from .errors import InputReadError, ParseError
from .exchanges import EXCHANGE_PARSERS, ExchangeParser, get_parser
from .log_utils import get_logger
from .schemas import CSV_HEADERS, NormalizedRecord, OrderBook, RowError

LOGGER = get_logger(__name__)


def read_rows(file_bytes: bytes, encoding: str = "utf-8") -> List[List[str]]:
    """Decode and split the full input. Blank lines are dropped."""
    try:
        text_stream = TextIOWrapper(BytesIO(file_bytes), encoding=encoding, newline="")
        return [row for row in csv.reader(text_stream) if row]
    except (LookupError, UnicodeDecodeError, csv.Error) as exc:
        raise InputReadError(f"failed to read input as {encoding} CSV: {exc}") from exc


def normalize_rows(
    rows: Iterable[List[str]],
    parser: ExchangeParser,
    book: OrderBook,
    *,
    strict_sides: bool = False,
    header_rows: int = 1,
) -> Tuple[List[NormalizedRecord], List[RowError]]:
    valid: List[NormalizedRecord] = []
    errors: List[RowError] = []

    for i, row in enumerate(rows, start=1):  # row 1 is the header
        if i <= header_rows:
            continue
        try:
            valid.append(parser.parse(book, row, strict_sides=strict_sides))
        except ParseError as exc:
            LOGGER.warning("[%s] error parsing record at row %d: %s", parser.exchange, i, exc.message)
            errors.append(
                RowError(row_number=i, exchange=parser.exchange, error=exc.message, raw_row=list(row))
            )

    return valid, errors


def parse_csv(
    file_bytes: bytes,
    exchange: str,
    book: OrderBook,
    *,
    registry: Mapping[str, ExchangeParser] = EXCHANGE_PARSERS,
    strict_sides: bool = False,
    encoding: str = "utf-8",
    header_rows: int = 1,
) -> Tuple[List[NormalizedRecord], List[RowError]]:
    """
    Parse an exchange export into NormalizedRecord objects.
    Returns:
      valid_rows: list[NormalizedRecord], in input order
      errors: list[RowError] for rows the exchange parser rejected

    Raises UnknownExchangeError for an unregistered exchange and
    InputReadError when the bytes are not readable CSV.
    """
    parser = get_parser(exchange, registry)
    rows = read_rows(file_bytes, encoding=encoding)
    return normalize_rows(rows, parser, book, strict_sides=strict_sides, header_rows=header_rows)


def write_csv(stream: TextIO, records: Iterable[NormalizedRecord]) -> int:
    """Write the fixed header plus one line per record. Returns the record count."""
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    count = 0
    for record in records:
        writer.writerow(record.to_row())
        count += 1
    stream.flush()
    return count
