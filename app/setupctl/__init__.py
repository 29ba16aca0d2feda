"""setupctl - machine setup and command wrappers."""

__version__ = "0.1.0"
