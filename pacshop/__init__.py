"""A small Presentation-Abstraction-Control web shop served with Flask."""

__version__ = "0.1.0"