"""Cookbook service: recipe acquisition from TheMealDB and a favorites catalog."""

__version__ = "0.1.0"
