"""Test helpers module for shared test utilities.

- factories: exact amount constructors
"""

from tests.helpers.factories import lp_tokens, staked, tokens

__all__ = [
    "tokens",
    "staked",
    "lp_tokens",
]
