"""blockdrop: a falling-block puzzle game built on a pure state reducer."""

__version__ = "0.1.0"
