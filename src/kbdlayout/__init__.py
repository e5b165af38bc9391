"""kbdlayout — standard software keyboard layout composition."""

__version__ = "0.1.0"
