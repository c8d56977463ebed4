"""
Nominatim geocoding adapter for alert-map.

This module provides the implementation of GeocoderPort.
"""

from .client import NominatimGeocoder

__all__ = ["NominatimGeocoder"]
