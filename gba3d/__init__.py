"""Fixed-point software rasterizer: cameras, models, triangles and lines drawn into 16-bit framebuffers."""

__version__ = "0.1.0"