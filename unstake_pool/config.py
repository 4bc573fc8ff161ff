"""Pool configuration."""

import os
from dataclasses import dataclass

STRICT_PARAMETERS_ENV = "UNSTAKE_POOL_STRICT_PARAMETERS"


@dataclass(frozen=True)
class PoolConfig:
    """Behavior flags for LpPool.

    Attributes:
        strict_parameters: If True, LpPool.init rejects a zero price, a zero
            liquidity target, min_fee > max_fee and max_fee above 100%.
            If False, parameters are taken as given.
    """

    strict_parameters: bool = False

    @classmethod
    def from_env(cls) -> "PoolConfig":
        """Build configuration from environment variables.

        - UNSTAKE_POOL_STRICT_PARAMETERS: validate init parameters (default: false)
        """
        strict = os.environ.get(STRICT_PARAMETERS_ENV, "false").lower() in ("true", "1", "yes")
        return cls(strict_parameters=strict)


# Default configuration instance
DEFAULT_POOL_CONFIG = PoolConfig()
