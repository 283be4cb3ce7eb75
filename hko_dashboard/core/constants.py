"""Shared constants for the normalization layer and the HKO client.

Data types
----------
rhrread - current weather report (temperature, humidity, rainfall, UV,
          warnings, special tips, icon codes)
fnd     - nine-day weather forecast (general situation, per-day forecast)
"""
from __future__ import annotations

# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------

PLACEHOLDER = "--"

# Attribute names tried, in order, when the requested one is missing
FALLBACK_FIELDS: tuple[str, ...] = ("value", "text", "name", "description")

MAX_NORMALIZE_DEPTH = 16

# ---------------------------------------------------------------------------
# HKO open data API
# ---------------------------------------------------------------------------

DATA_TYPE_CURRENT = "rhrread"
DATA_TYPE_FORECAST = "fnd"

SUPPORTED_LANGS = frozenset({"tc", "en"})

# Station names whose reading is preferred for the headline temperature
HKO_STATION_NAMES = frozenset({"香港天文台", "Hong Kong Observatory"})
