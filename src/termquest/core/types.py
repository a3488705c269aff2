"""Shared type aliases for the core and domain layers."""
from typing import Literal

Page = Literal["main", "package_hunt"]

__all__ = ["Page"]
