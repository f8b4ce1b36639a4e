"""Read typed configuration values from environment variables."""

from env_option.utils.env_utils import MISSING, OptionType, get, optional, require, with_default
from env_option.utils.errors import EnvOptionError, NotPresent, ParseFailed
from env_option.utils.parse_utils import adapter, json_adapter, parse_bool, parse_flag, parse_list

__all__ = [
    "MISSING",
    "OptionType",
    "get",
    "optional",
    "require",
    "with_default",
    "EnvOptionError",
    "NotPresent",
    "ParseFailed",
    "adapter",
    "json_adapter",
    "parse_bool",
    "parse_flag",
    "parse_list",
]
