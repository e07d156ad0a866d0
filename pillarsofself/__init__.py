"""The 7 Pillars of Self: a reflective journey game and the pygame scene toolkit behind it."""

__version__ = "0.1.0"