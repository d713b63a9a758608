from .logging_utils import get_logger, setup_logging
from .path_utils import ensure_directory

__all__ = [
    'get_logger',
    'setup_logging',
    'ensure_directory',
]
