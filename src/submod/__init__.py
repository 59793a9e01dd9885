"""Shift the timing of SRT and VTT subtitles."""

__version__ = "0.3.0"
