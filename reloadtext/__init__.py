"""Line-by-line text corrections for case tags, numbers, punctuation, quotes and articles."""

__version__ = "0.1.0"
__all__ = ["__version__"]