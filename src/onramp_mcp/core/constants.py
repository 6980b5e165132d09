"""Shared constants and environment-provided settings."""

from __future__ import annotations

import os

# Backend that proxies fiat on-ramp lookups and signs MoonPay URLs
SWAPS_API_V2_BASE_URL = os.getenv("SWAPS_API_V2_BASE_URL", "https://swap.metaswap.codefi.network")

# Seconds to wait on the network-assisted providers
DEFAULT_FETCH_TIMEOUT = float(os.getenv("ONRAMP_FETCH_TIMEOUT", "30"))

# Publishable partner keys, provisioned through the environment
TRANSAK_API_KEY = os.getenv("TRANSAK_API_KEY", "")
MOONPAY_API_KEY = os.getenv("MOONPAY_API_KEY", "")
COINBASEPAY_API_KEY = os.getenv("COINBASEPAY_API_KEY", "")

# Host reported to Transak and attribution tag reported to Coinbase/MoonPay
TRANSAK_HOST_URL = "https://metamask.io"
EXTENSION_CONTEXT = "extension"
