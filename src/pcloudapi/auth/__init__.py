"""Public auth exports for pcloudapi."""

from __future__ import annotations

from .profile import Profile, Subscription, load_profile, profile_path

__all__ = ["Profile", "Subscription", "load_profile", "profile_path"]
