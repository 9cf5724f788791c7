"""
Fixed-size vectors.

Components:
    vector: Vector container, construction, access and mapping
    geometry: Magnitude, angles, rotation, projection, reflection
    matrices: Row/column conversion and row-vector products
"""

from geode.vectors.vector import Vector

__all__ = ["Vector"]
