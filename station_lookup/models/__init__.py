"""
Data models for resolved stations.
"""

from .airport import Airport
from .runway import Runway, Geometry
from .frequency import Frequency

__all__ = ['Airport', 'Runway', 'Geometry', 'Frequency']
