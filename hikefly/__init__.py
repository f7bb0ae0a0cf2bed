"""Hike-and-fly terrain analysis: launch discovery, glide reach, hiking cost and ranking on a DEM."""

__version__ = "0.1.0"
__all__ = ["model", "terrain", "launch", "glide", "hike", "score"]