"""Common utility functions for namematch."""

from namematch.utils.timestamps import get_iso_timestamp

__all__ = ["get_iso_timestamp"]
