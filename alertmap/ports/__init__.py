"""
Port interfaces for alert-map hexagonal architecture.

This module defines the port interfaces (Protocols) that define
the contracts between the core domain and external adapters.
"""

from .archive import AlertArchivePort, AlertFetchError
from .geocoder import GeocoderPort

__all__ = ["AlertArchivePort", "AlertFetchError", "GeocoderPort"]
