"""
WickSignal – Main Application Entry Point
===========================================
Dos loops independientes:

  bot     Broker WS → DecisionEngine (vela → tendencia → trade) → Broker WS
  quotes  Symbol search → TradingView WS → handshake → QuoteParseLoop → log
  all     Ambos a la vez; la falla de uno NO detiene al otro.

CÓDIGOS DE SALIDA:
  0  terminación normal
  1  error fatal en algún loop
  2  configuración incompleta

  python -m wicksignal bot
  python -m wicksignal quotes --pair ethusdt --market crypto
"""

from __future__ import annotations

import argparse
import asyncio
from typing import List, Optional

from wicksignal.container import Container, init_container
from wicksignal.domain.exceptions.domain_errors import ConfigurationError
from wicksignal.shared.logging.logger import get_logger, setup_logging

logger = get_logger("main")

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wicksignal",
        description="WickSignal – señales por forma de vela y stream de cotizaciones",
    )
    parser.add_argument(
        "--log-level", type=str, default=None,
        help="Nivel de logging (DEBUG, INFO, WARNING...)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("bot", help="Correr el decision engine contra el broker")

    quotes = subparsers.add_parser("quotes", help="Stream de cotizaciones de TradingView")
    quotes.add_argument("--pair", type=str, default=None, help="Par a cotizar (e.g. btcusdt)")
    quotes.add_argument("--market", type=str, default=None, help="Categoría (e.g. crypto)")

    run_all = subparsers.add_parser("all", help="Ambos loops en paralelo")
    run_all.add_argument("--pair", type=str, default=None, help="Par a cotizar")
    run_all.add_argument("--market", type=str, default=None, help="Categoría")

    return parser


async def run_all(container: Container, pair: Optional[str], market: Optional[str]) -> int:
    """Corre ambos loops como tasks independientes."""
    tasks = [
        asyncio.create_task(container.expertoption_gateway.run(), name="decision-engine"),
        asyncio.create_task(
            container.tradingview_gateway.run(pair, market), name="quote-parse-loop"
        ),
    ]
    results = await asyncio.gather(*tasks, return_exceptions=True)

    exit_code = EXIT_OK
    for task, result in zip(tasks, results):
        if isinstance(result, ConfigurationError):
            logger.error("%s: %s", task.get_name(), result.message)
            exit_code = max(exit_code, EXIT_CONFIG)
        elif isinstance(result, Exception):
            logger.error("%s terminó con error: %s", task.get_name(), result)
            exit_code = max(exit_code, EXIT_FATAL)
    return exit_code


async def run(args: argparse.Namespace, container: Container) -> int:
    if args.command == "bot":
        await container.expertoption_gateway.run()
    elif args.command == "quotes":
        await container.tradingview_gateway.run(args.pair, args.market)
    else:
        return await run_all(container, args.pair, args.market)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    container = init_container()
    setup_logging(args.log_level or container.settings.log_level)

    try:
        return asyncio.run(run(args, container))
    except ConfigurationError as e:
        logger.error("Configuración incompleta: %s", e.message)
        return EXIT_CONFIG
    except KeyboardInterrupt:
        logger.info("Interrumpido por el usuario")
        return EXIT_OK
    except Exception as e:
        logger.error("Error fatal: %s", e)
        return EXIT_FATAL


if __name__ == "__main__":
    raise SystemExit(main())
