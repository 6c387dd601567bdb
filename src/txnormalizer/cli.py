"""Convert an exchange's CSV trade export (stdin) into normalized CSV (stdout)."""

from __future__ import annotations

import argparse
import sys
from typing import BinaryIO, Mapping, Optional, Sequence, TextIO

from pydantic import ValidationError

from .errors import InputReadError
from .exchanges import EXCHANGE_PARSERS, ExchangeParser, supported_exchanges
from .log_utils import get_logger
from .runner import run_normalization
from .schemas import NormalizeConfig

LOGGER = get_logger(__name__)

__all__ = ["build_parser", "main"]

USAGE_EXIT_CODE = 1


class _UsageParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 (not argparse's 2) on bad usage."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(USAGE_EXIT_CODE, f"error: {message}\n")


def build_parser(registry: Mapping[str, ExchangeParser] = EXCHANGE_PARSERS) -> argparse.ArgumentParser:
    exchanges = supported_exchanges(registry)
    parser = _UsageParser(
        description=__doc__,
        usage=f"%(prog)s <format: {'|'.join(exchanges)}> <basecurrency> <quotecurrency> [--strict] [--encoding ENC] [--header-rows N]",
    )
    parser.add_argument("exchange", choices=exchanges, help="Exchange the export comes from")
    parser.add_argument("base_currency", help="Currency bought or sold, e.g. ETH")
    parser.add_argument("quote_currency", help="Currency prices are quoted in, e.g. BTC")
    parser.add_argument(
        "--strict",
        dest="strict_sides",
        action="store_true",
        default=False,
        help="Treat an unrecognized buy/sell token as a row error instead of leaving the type blank",
    )
    parser.add_argument("--encoding", default="utf-8", help="Text encoding of the input export (default: utf-8)")
    parser.add_argument(
        "--header-rows",
        dest="header_rows",
        type=int,
        default=1,
        help="Number of leading rows to skip without parsing (default: 1)",
    )
    return parser


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    registry: Mapping[str, ExchangeParser] = EXCHANGE_PARSERS,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    parser = build_parser(registry)
    args = parser.parse_args(argv)

    try:
        cfg = NormalizeConfig.model_validate(
            {
                "exchange": args.exchange,
                "base_currency": args.base_currency,
                "quote_currency": args.quote_currency,
                "strict_sides": args.strict_sides,
                "encoding": args.encoding,
                "header_rows": args.header_rows,
            },
            context={"registry": registry},
        )
    except ValidationError as ve:
        parser.print_usage(sys.stderr)
        print(f"error: {ve}", file=sys.stderr)
        return USAGE_EXIT_CODE

    fin = stdin if stdin is not None else sys.stdin.buffer
    fout = stdout if stdout is not None else sys.stdout

    try:
        run_normalization(cfg, fin, fout, registry=registry)
    except InputReadError as exc:
        LOGGER.critical("[main] failed to read full input file: %s", exc)
        return 1
    except OSError as exc:
        LOGGER.critical("[main] error writing transactions: %s", exc)
        return 1

    LOGGER.info("[main] Completed successfully.")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
