"""Browse air-quality stations, sensors and measurements with a local JSON cache and charts."""

__version__ = "1.0.0"