"""Sampler settings, read from the environment or a YAML file."""

from enum import StrEnum
from pathlib import Path
from typing import Any

import hypothesis.strategies as st
from hypothesis.strategies import SearchStrategy
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from cellframe.common.exceptions import ConfigurationError
from cellframe.common.types import DensityProfile
from cellframe.config.constants import (
    CONFIG_SECTION,
    DEFAULT_COUNT,
    DEFAULT_KEY_TYPE,
    DEFAULT_PROFILE,
    DEFAULT_VALUE_TYPE,
    ENV_COUNT,
    ENV_KEY_TYPE,
    ENV_MAX_SIZE,
    ENV_PROFILE,
    ENV_SEED,
    ENV_VALUE_TYPE,
    get_env_int,
    get_env_str,
)


class ValueType(StrEnum):
    """Inner value types the sampler knows how to generate."""
    INT = "int"
    FLOAT = "float"
    TEXT = "text"
    BOOL = "bool"

    def strategy(self) -> SearchStrategy[Any]:
        return VALUE_STRATEGIES[self]


class KeyType(StrEnum):
    """Key types the sampler knows how to generate for series."""
    INT = "int"
    TEXT = "text"

    def strategy(self) -> SearchStrategy[Any]:
        return VALUE_STRATEGIES[ValueType(self.value)]


VALUE_STRATEGIES: dict[ValueType, SearchStrategy[Any]] = {
    ValueType.INT: st.integers(min_value=-1000, max_value=1000),
    # NaN has no total order, so it would scramble series keys
    ValueType.FLOAT: st.floats(allow_nan=False, allow_infinity=False, width=32),
    ValueType.TEXT: st.text(alphabet=st.characters(categories=["Lu", "Ll", "Nd"]), max_size=8),
    ValueType.BOOL: st.booleans(),
}


class SamplerSettings(BaseModel):
    """Settings for drawing preview samples."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    count: int = Field(default=DEFAULT_COUNT, ge=1)
    seed: int | None = None
    max_size: int | None = Field(default=None, ge=1)
    value_type: ValueType = ValueType(DEFAULT_VALUE_TYPE)
    key_type: KeyType = KeyType(DEFAULT_KEY_TYPE)
    profile: DensityProfile = DensityProfile(DEFAULT_PROFILE)

    @classmethod
    def from_env(cls) -> "SamplerSettings":
        """Create settings from ``CELLFRAME_*`` environment variables."""
        return cls._build(
            {
                "count": get_env_int(ENV_COUNT, DEFAULT_COUNT),
                "seed": get_env_int(ENV_SEED, None),
                "max_size": get_env_int(ENV_MAX_SIZE, None),
                "value_type": get_env_str(ENV_VALUE_TYPE, DEFAULT_VALUE_TYPE),
                "key_type": get_env_str(ENV_KEY_TYPE, DEFAULT_KEY_TYPE),
                "profile": get_env_str(ENV_PROFILE, DEFAULT_PROFILE),
            },
            source="environment",
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> "SamplerSettings":
        """
        Load settings from a YAML file.

        The settings may sit at the top level or under a ``sampler:`` section.

        Raises:
            ConfigurationError: If the file is missing, unparsable or invalid
        """
        path = Path(path)
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}", context={"path": str(path)})

        yaml = YAML(typ="safe")
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.load(f)
        except YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}", context={"path": str(path)}) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError("Config file must contain a mapping at root level", context={"path": str(path)})

        if CONFIG_SECTION in data:
            data = data[CONFIG_SECTION] or {}
            if not isinstance(data, dict):
                raise ConfigurationError(
                    f"'{CONFIG_SECTION}' section must be a mapping",
                    config_section=CONFIG_SECTION,
                )

        return cls._build(data, source=str(path))

    def merged(self, **overrides: Any) -> "SamplerSettings":
        """Return a copy with every non-None override applied."""
        data = self.model_dump()
        data.update({key: value for key, value in overrides.items() if value is not None})
        return self._build(data, source="overrides")

    @classmethod
    def _build(cls, data: dict[str, Any], source: str) -> "SamplerSettings":
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            first = e.errors()[0]
            key = ".".join(str(part) for part in first["loc"]) or None
            raise ConfigurationError(
                f"Invalid sampler settings from {source}: {key}: {first['msg']}",
                config_section=CONFIG_SECTION,
                config_key=key,
                context={"source": source},
            ) from e
