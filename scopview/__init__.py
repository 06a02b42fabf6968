"""View textured Wavefront OBJ models in an OpenGL window."""

__version__ = "0.1.0"