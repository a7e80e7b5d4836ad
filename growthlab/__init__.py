"""Growth, contribution and start-timing simulators behind a small JSON API."""

__version__ = "0.1.0"
