"""
Adapters for alert-map hexagonal architecture.

This module contains the concrete implementations of port interfaces
that handle external I/O and infrastructure concerns.
"""

from .fema import IpawsArchiveClient
from .nominatim import NominatimGeocoder

__all__ = ["IpawsArchiveClient", "NominatimGeocoder"]
