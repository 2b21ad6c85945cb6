from __future__ import annotations

import re

_WHITESPACE = re.compile(r"\s+")


def normalize_address(address: str) -> str:
    """
    Normalize a free-form address for substring matching.

    Lower-cases the text, collapses runs of whitespace into single spaces and
    trims both ends.

    Args:
        address: Raw address as typed by the customer.

    Returns:
        The normalized address; empty when the input holds only whitespace.
    """
    return _WHITESPACE.sub(" ", address.lower()).strip()
