"""Version information for neo-auth."""

__version__ = "0.1.0"
