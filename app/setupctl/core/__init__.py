"""Core configuration and path handling for setupctl."""
