# flake8: noqa E402
# Run via uv to load project deps, e.g.:
# uv run scripts/crypto_basket_probe.py --provider kraken
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Ensure the src directory is importable when the script is invoked via uv/python directly.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from domain.crypto_filter import filter_crypto_basket
from domain.rules import DEFAULT_CRYPTO_BASKET
from services.crypto_sources import CryptoProvider, build_crypto_source


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fetch live crypto tickers and print the filtered basket.")
    parser.add_argument(
        "--provider",
        default=CryptoProvider.BINANCE.value,
        choices=[provider.value for provider in CryptoProvider],
        help="Crypto ticker source (default: binance).",
    )
    parser.add_argument(
        "--symbols",
        default=None,
        help="Comma separated basket override, e.g. BTC,ETH. Defaults to the built-in basket.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    basket = frozenset(s.strip().upper() for s in args.symbols.split(",")) if args.symbols else DEFAULT_CRYPTO_BASKET
    source = build_crypto_source(args.provider)
    tickers = source.fetch_tickers()
    rates = filter_crypto_basket(tickers, basket)

    payload = {
        "provider": source.name,
        "tickers_received": len(tickers),
        "missing": sorted(basket - rates.keys()),
        "rates": dict(sorted(rates.items())),
    }
    print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
