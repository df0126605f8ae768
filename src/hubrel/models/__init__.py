"""Data models for hubrel."""

from hubrel.models.user import User
from hubrel.models.release import Release, Asset
from hubrel.models.options import ReleaseOptions, ReleaseOptionsBuilder

__all__ = ["User", "Release", "Asset", "ReleaseOptions", "ReleaseOptionsBuilder"]
