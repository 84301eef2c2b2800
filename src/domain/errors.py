from __future__ import annotations


class RateOracleError(RuntimeError):
    """Base class for errors raised while building a rate snapshot."""


class ConfigurationError(RateOracleError):
    pass


class FatalSourceError(RateOracleError):
    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source


class OptionalSourceError(RateOracleError):
    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source


class EntryParseError(ValueError):
    def __init__(self, symbol: str, price_text: str) -> None:
        super().__init__(f"Invalid price {price_text!r} for {symbol}")
        self.symbol = symbol
        self.price_text = price_text


__all__ = [
    "ConfigurationError",
    "EntryParseError",
    "FatalSourceError",
    "OptionalSourceError",
    "RateOracleError",
]
