"""Configuration for cellframe sampling."""

from cellframe.config.settings import KeyType, SamplerSettings, ValueType

__all__ = ["SamplerSettings", "ValueType", "KeyType"]
