"""
Configuration management for the uploader.

Contains the Pydantic settings model resolved once at startup from defaults,
environment variables, a `.env` file and command line flags.
"""

from uploader.config.settings import Settings

__all__ = ["Settings"]
