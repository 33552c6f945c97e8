"""Single point of truth for the version of the fish_recognition package."""

import importlib.metadata

__version__ = importlib.metadata.version("fish_recognition")
