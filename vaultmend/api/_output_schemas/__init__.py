"""Output schemas for API commands.

Importing this package registers every schema with the registry.
"""

from . import config, vault
from ._base import BaseOutputSchema

__all__ = ["BaseOutputSchema", "config", "vault"]
