"""
Default configuration values for pagescope.
"""

# Load validation defaults
DEFAULT_LOAD_VALIDATIONS = True

# Logging defaults
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOGGER_NAME = "pagescope"

# Environment variable prefix
ENV_PREFIX = "PAGESCOPE_"
