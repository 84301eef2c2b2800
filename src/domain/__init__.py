"""Domain logic for the rate oracle.

This package holds the provider-independent part of the system: quote models,
the category rule tables, and the normalization, fallback, filtering and merge
steps that turn raw quotes into a snapshot. Nothing here performs I/O so the
engine can be exercised with arbitrary rules and baskets in tests.
"""

__all__ = [
    "aggregator",
    "crypto_filter",
    "errors",
    "fallback",
    "normalizer",
    "quotes",
    "rules",
    "snapshot",
]
