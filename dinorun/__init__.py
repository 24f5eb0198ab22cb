"""A side-scrolling dinosaur runner on a simulated character LCD, played in a terminal."""

__version__ = "0.1.0"
__all__ = ["__version__"]