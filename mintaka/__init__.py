from .core import Mintaka
from .memory import Memory
from .config.config import load_config

__all__ = ['Mintaka', 'Memory', 'load_config']
