"""Configuration subsystem for benchreport.

Public API:
- UserConfig: User preferences model
- load_user_config: Load user preferences from XDG config dir
- get_user_config_path: Return the XDG user config path
"""

from benchreport.config.user_config import (
    UserConfig,
    UserParsingConfig,
    UserUIConfig,
    get_user_config_path,
    load_user_config,
)

__all__ = [
    "UserConfig",
    "UserParsingConfig",
    "UserUIConfig",
    "get_user_config_path",
    "load_user_config",
]
