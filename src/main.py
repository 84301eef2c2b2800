from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

import requests

from config import AppSettings, load_config
from domain.errors import ConfigurationError, FatalSourceError
from services.crypto_sources import CryptoProvider, build_crypto_source
from services.dolar_api_client import DolarApiClient
from services.exchange_rate_api_client import ExchangeRateApiClient
from services.rate_oracle import RateOracle
from services.snapshot_store import JsonSnapshotStore

logger = logging.getLogger(__name__)


def build_rate_oracle(
    settings: AppSettings,
    *,
    crypto_provider: str | None = None,
    session: requests.Session | None = None,
) -> RateOracle:
    session = session or requests.Session()
    timeout = settings.request_timeout
    return RateOracle(
        argentina_source=DolarApiClient(
            base_url=settings.argentina_api_url, name="DolarApi Argentina", timeout=timeout, session=session
        ),
        bolivia_source=DolarApiClient(
            base_url=settings.bolivia_api_url, name="DolarApi Bolivia", timeout=timeout, session=session
        ),
        world_source=ExchangeRateApiClient(
            api_key=settings.exchange_key,
            base_url=settings.exchange_rate_api_url,
            timeout=timeout,
            session=session,
        ),
        crypto_source=build_crypto_source(
            crypto_provider or settings.crypto_provider, timeout=timeout, session=session
        ),
    )


def run(output: Path | None = None, *, crypto_provider: str | None = None) -> Path:
    settings = load_config()
    oracle = build_rate_oracle(settings, crypto_provider=crypto_provider)
    snapshot = oracle.run()

    store = JsonSnapshotStore(path=output or settings.output_path)
    path = store.write(snapshot)
    logger.info(
        "Oracle update complete: %s saved (%d fiat rates, %d crypto rates)",
        path,
        len(snapshot.rates),
        len(snapshot.crypto_rates),
    )
    return path


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Fetch exchange rates and write the rate oracle snapshot.")
    parser.add_argument("--output", type=Path, default=None, help="Snapshot path (default: OUTPUT_PATH or rates.json).")
    parser.add_argument(
        "--crypto-provider",
        choices=[provider.value for provider in CryptoProvider],
        default=None,
        help="Crypto ticker source (default: CRYPTO_PROVIDER or binance).",
    )
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    try:
        run(args.output, crypto_provider=args.crypto_provider)
    except ConfigurationError as exc:
        logger.error("Configuration error: %s", exc)
        return 1
    except FatalSourceError as exc:
        logger.error("Aborting, no snapshot written: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
