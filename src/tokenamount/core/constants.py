from __future__ import annotations

# 10**77 is the largest power of ten below 2**256.
MAX_DECIMALS = 77

# Largest positive exponent accepted in scientific notation. Negative
# exponents past MAX_DECIMALS always fail on precision instead.
MAX_EXPONENT = 10_000_000
