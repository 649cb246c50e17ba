"""Mothership: a top-down space arcade game with a roaming boss arena."""

__version__ = "0.1.0"