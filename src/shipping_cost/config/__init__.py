from .loader import DEFAULT_CONFIG_PATH, ConfigError, load_config, parse_config

# Config exports are intentionally small.
__all__ = ["DEFAULT_CONFIG_PATH", "ConfigError", "load_config", "parse_config"]
