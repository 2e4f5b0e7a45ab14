"""An arcade game of dodging falling aliens across three timed levels."""

__version__ = "1.0.0"
__all__ = ["__version__"]