"""
Core protocols for Geode.

These define the structural interfaces the containers accept from
outside the library. We use Protocol (structural typing) rather than ABC
(nominal typing) so that any angle library can be used with
``Vector.rotate`` without inheriting from a Geode type.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class AngleLike(Protocol):
    """
    Minimal protocol for an angle tagged with a unit.
    
    Degrees, radians, gradians, turns or any other unit qualifies as long
    as it can express itself in radians.
    """
    
    def to_radians(self) -> float:
        """Angle expressed in radians, as a plain number."""
        ...
