"""
Core domain models and pure functions for alert-map.

This module contains the alert models and the geometry derivations
(shapes, boundaries, markers, viewport filtering) that are
independent of external I/O and infrastructure concerns.
"""

from .models import (
    Alert, AlertInfo, AlertArea, PolygonGeometry, CircleGeometry,
    Ring, Disc, BoundarySet, Marker, ViewportBounds, LatLng,
)
from .shapes import parse_ring, parse_disc
from .boundaries import extract_boundaries, alert_bounds, fit_bounds
from .markers import area_center, derive_markers
from .viewport import point_in_bounds, alert_in_viewport, filter_by_viewport

__all__ = [
    "Alert", "AlertInfo", "AlertArea", "PolygonGeometry", "CircleGeometry",
    "Ring", "Disc", "BoundarySet", "Marker", "ViewportBounds", "LatLng",
    "parse_ring", "parse_disc",
    "extract_boundaries", "alert_bounds", "fit_bounds",
    "area_center", "derive_markers",
    "point_in_bounds", "alert_in_viewport", "filter_by_viewport",
]
