"""Vector and matrix math, rays, a text progress bar, and a PPM gradient renderer."""

__version__ = "0.1.0"
__all__ = ["mmath", "ray", "progress", "render"]