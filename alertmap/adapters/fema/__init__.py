"""
OpenFEMA IPAWS archive adapter for alert-map.

This module provides the implementation of AlertArchivePort
backed by the OpenFEMA IpawsArchivedAlerts dataset.
"""

from .client import IpawsArchiveClient

__all__ = ["IpawsArchiveClient"]
