APP_NAME = "dirtitle"
ENV_PREFIX = "DIRTITLE_"

DEFAULT_SEPARATOR = " ‹- "
DEFAULT_MEMORY_ROOT = "/run/shm"
FALLBACK_TITLE = "Terminal"
HOME_TITLE = "~"
PLACEHOLDER_TITLE = " "
