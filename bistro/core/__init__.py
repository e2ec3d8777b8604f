"""
Orchestration layer: the kitchen bag, the station manager and the menu
CSV loader.
"""

from .kitchen import Kitchen
from .station_manager import StationManager
from .csv_loader import load_dishes_csv

__all__ = ["Kitchen", "StationManager", "load_dishes_csv"]
