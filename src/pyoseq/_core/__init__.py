from ._config import Config, get_config, set_config
from ._logging import get_logger, setup_logger
from ._main import CommonBase, Pipeable
from ._protocols import SupportsRichComparison

__all__ = [
    "CommonBase",
    "Config",
    "Pipeable",
    "SupportsRichComparison",
    "get_config",
    "get_logger",
    "set_config",
    "setup_logger",
]
