"""Common utilities shared by trackademic components."""

from . import http_utils
from . import prompts

__all__ = ["http_utils", "prompts"]
