"""mpd-search: build and parse MPD filter expressions from search crumbs."""

__version__ = "0.3.0"
