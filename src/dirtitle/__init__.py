"""Terminal window titles derived from directory paths."""

from dirtitle.common import disable_library_logging
from dirtitle.common import enable_library_logging as enable_logging
from dirtitle.titles import TitleContext, TitleResolver, get_title

disable_library_logging()

__all__ = [
    "TitleContext",
    "TitleResolver",
    "enable_logging",
    "get_title",
]
