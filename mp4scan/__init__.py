"""Read MP4 and QuickTime box structure and print the fields of header boxes."""

__version__ = "0.1.0"