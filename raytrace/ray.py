"""Rays with an origin and a direction."""

from __future__ import annotations

from dataclasses import dataclass

from raytrace.mmath import Vec3

Color = Vec3


@dataclass(frozen=True)
class Ray:
    """A half-line starting at ``origin`` and heading along ``direction``."""

    origin: Vec3
    direction: Vec3

    def at(self, t: float) -> Vec3:
        """Return the point at parameter ``t`` along the ray."""
        return self.origin + t * self.direction