from .enums import Scope
from .logging import get_logger, set_debug
