"""TUI (Terminal User Interface) module for stackview.

Browses a call graph one node at a time with vi-style keys.
"""
from .events import InputKey, KeyEvents
from .navigator import Navigator
from .router import Router
from .state import ItemRow, ViewSnapshot

__all__ = ["InputKey", "ItemRow", "KeyEvents", "Navigator", "Router", "ViewSnapshot"]
