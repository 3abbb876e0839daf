"""Radio spectrum band lookup: band resolution, channels and permissions."""

__version__ = "0.1.0"
