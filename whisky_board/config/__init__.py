from .loader import BoardConfig, ConfigError, load_config

__all__ = ["BoardConfig", "ConfigError", "load_config"]
