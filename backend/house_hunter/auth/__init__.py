# house_hunter/auth/__init__.py
from house_hunter.auth.identity import Identity

__all__ = ["Identity"]
