"""Traditional (web2) credential configuration."""

from .options import Web2Options

__all__ = [
    "Web2Options",
]
