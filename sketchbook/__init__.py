"""Small generative and interactive 2D drawing sketches run with pygame."""

__version__ = "0.1.0"