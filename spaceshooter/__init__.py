"""A small arcade space shooter on pygame, with its block pool and linked list."""

__version__ = "0.1.0"