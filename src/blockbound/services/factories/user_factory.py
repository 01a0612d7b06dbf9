"""Factory for creating player profiles."""
from __future__ import annotations

from blockbound.core.rng import RNG
from blockbound.domain.entities import UserProfile
from blockbound.services.errors import SessionError

from .id_factory import make_instance_id


def create_user_profile(username: str, wallet: str, rng: RNG) -> UserProfile:
    """Create a level-1 profile bound to a wallet address."""
    cleaned = username.strip()
    if not cleaned:
        raise SessionError("Username must not be empty.")
    if not wallet:
        raise SessionError("A wallet address is required.")
    return UserProfile(id=make_instance_id(rng, "user"), username=cleaned, wallet=wallet)
