"""Call functions on time-based events, blocking (zila.scheduling) or with asyncio (zila.aio)."""

__version__ = "0.1.8"