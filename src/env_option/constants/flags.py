"""Fixed names and token tables shared by the parsers, logger and checker."""

# Set to "1" to get DEBUG output from the env_option loggers
DEBUG_VAR = "DEBUG_ENV_OPTION"

# Declaration file the checker looks for when no path is given
DEFAULT_SCHEMA_FILE = "env_schema.json"

# Exact spellings accepted by parse_bool
STRICT_TRUE = "true"
STRICT_FALSE = "false"

# Spellings accepted by parse_flag (compared lower-cased and stripped)
TRUE_FLAG_VALUES = frozenset({"1", "true", "yes", "on"})
FALSE_FLAG_VALUES = frozenset({"0", "false", "no", "off"})

# Shown instead of the value of a variable declared as secret
SECRET_MASK = "********"
