from .level_profile import render_level_profile

__all__ = [
    "render_level_profile",
]
