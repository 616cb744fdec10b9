from .core.enums import Scope
from .store import DotStore, HomeResolutionError, ScopedValue, StoreConfig
