"""linkcheck — bulk hyperlink reachability checker."""

__version__ = "0.1.0"
