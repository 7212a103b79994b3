"""
Repair policies for known capture artifacts.

These are narrow, empirically-motivated fixes applied to data that the
pattern set could not match.
"""

from untty.repair.garbage import drop_console_garbage

__all__ = ["drop_console_garbage"]
