"""Colors, vectors, geometry, generational and per-type storage, sprite animation, a mouse camera and input state for games."""

__version__ = "0.4.14"