"""HTTP layer.  Each API version lives in its own subpackage exposing a ``router``."""
