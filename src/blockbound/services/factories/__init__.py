"""Factory helpers for runtime entities."""

from .id_factory import make_instance_id
from .user_factory import create_user_profile

__all__ = [
    "create_user_profile",
    "make_instance_id",
]
