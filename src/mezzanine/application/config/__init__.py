"""Configuration record schema, loading and conversion.

Public API:
    - MezzanineConfiguration: Root configuration record
    - StairConfig, RailingConfig, PalletGateConfig: Accessory records
    - load_config / load_config_from_dict / save_config
    - ConfigError: Exception for configuration errors
    - config_to_domain / domain_to_config: Record <-> domain conversion

Example:
    >>> from pathlib import Path
    >>> from mezzanine.application.config import load_config, config_to_domain
    >>>
    >>> try:
    ...     config = config_to_domain(load_config(Path("platform.json")))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from mezzanine.application.config.adapter import config_to_domain, domain_to_config
from mezzanine.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
    save_config,
)
from mezzanine.application.config.schema import (
    AccessoryConfig,
    MezzanineConfiguration,
    PalletGateConfig,
    RailingConfig,
    StairConfig,
)

__all__ = [
    "AccessoryConfig",
    "ConfigError",
    "MezzanineConfiguration",
    "PalletGateConfig",
    "RailingConfig",
    "StairConfig",
    "config_to_domain",
    "domain_to_config",
    "load_config",
    "load_config_from_dict",
    "save_config",
]
