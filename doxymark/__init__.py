"""Convert Doxygen XML output into Markdown pages and a table of contents."""

__version__ = "0.1.0"
