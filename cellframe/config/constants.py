"""Constants and default values for cellframe sampling configuration.

This module centralizes the configuration constants and environment variable
settings used by the sampler and the CLI.
"""

import os
from typing import Final

from cellframe.common.exceptions import ConfigurationError

# =============================================================================
# Environment Variable Names
# =============================================================================

ENV_VAR_PREFIX: Final[str] = "CELLFRAME_"

ENV_COUNT: Final[str] = f"{ENV_VAR_PREFIX}COUNT"
ENV_SEED: Final[str] = f"{ENV_VAR_PREFIX}SEED"
ENV_MAX_SIZE: Final[str] = f"{ENV_VAR_PREFIX}MAX_SIZE"
ENV_VALUE_TYPE: Final[str] = f"{ENV_VAR_PREFIX}VALUE_TYPE"
ENV_KEY_TYPE: Final[str] = f"{ENV_VAR_PREFIX}KEY_TYPE"
ENV_PROFILE: Final[str] = f"{ENV_VAR_PREFIX}PROFILE"
ENV_HYPOTHESIS_PROFILE: Final[str] = f"{ENV_VAR_PREFIX}HYPOTHESIS_PROFILE"


# =============================================================================
# Default Configuration Values
# =============================================================================

DEFAULT_COUNT: Final[int] = 5
DEFAULT_VALUE_TYPE: Final[str] = "int"
DEFAULT_KEY_TYPE: Final[str] = "text"
DEFAULT_PROFILE: Final[str] = "dirty"
DEFAULT_HYPOTHESIS_PROFILE: Final[str] = "default"

# Top-level YAML section holding sampler settings
CONFIG_SECTION: Final[str] = "sampler"


# =============================================================================
# Helper Functions
# =============================================================================


def get_env_str(env_var: str, default: str | None) -> str | None:
    """
    Get string value from environment variable.

    Args:
        env_var: Environment variable name
        default: Default value if not set

    Returns:
        String value from environment or default
    """
    return os.getenv(env_var, default)


def get_env_int(env_var: str, default: int | None) -> int | None:
    """
    Get integer value from environment variable.

    Unset or empty variables give ``default``.

    Raises:
        ConfigurationError: If the variable is set but is not an integer
    """
    raw = os.getenv(env_var)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{env_var} must be an integer, got {raw!r}",
            config_key=env_var,
        ) from e
