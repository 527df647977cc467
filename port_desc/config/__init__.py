from .loader import ConfigError, LookupConfig, load_config, resolve_config

__all__ = [
    "ConfigError",
    "LookupConfig",
    "load_config",
    "resolve_config",
]
