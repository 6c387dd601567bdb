from __future__ import annotations

from typing import BinaryIO, Mapping, TextIO

from .csv_normalizer import parse_csv, write_csv
from .errors import InputReadError
from .exchanges import EXCHANGE_PARSERS, ExchangeParser
from .log_utils import get_logger
from .schemas import NormalizeConfig, RunSummary

LOGGER = get_logger(__name__)


def run_normalization(
    cfg: NormalizeConfig,
    fin: BinaryIO,
    fout: TextIO,
    *,
    registry: Mapping[str, ExchangeParser] = EXCHANGE_PARSERS,
) -> RunSummary:
    """Read the whole export from ``fin`` and write normalized CSV to ``fout``.

    Row-level failures end up in ``RunSummary.errors``. Read failures raise
    InputReadError; write failures propagate as OSError.
    """
    try:
        data = fin.read()
    except OSError as exc:
        raise InputReadError(f"failed to read input: {exc}") from exc

    # 1) Parse every data row (bad rows are collected, not raised)
    records, errors = parse_csv(
        data,
        cfg.exchange,
        cfg.order_book,
        registry=registry,
        strict_sides=cfg.strict_sides,
        encoding=cfg.encoding,
        header_rows=cfg.header_rows,
    )

    # 2) Emit header + records
    written = write_csv(fout, records)

    summary = RunSummary(
        exchange=cfg.exchange,
        rows_read=len(records) + len(errors),
        records_written=written,
        rows_failed=len(errors),
        errors=errors,
    )
    LOGGER.info(
        "[%s] %s/%s: wrote %d records, skipped %d rows",
        cfg.exchange,
        cfg.base_currency,
        cfg.quote_currency,
        summary.records_written,
        summary.rows_failed,
    )
    return summary
