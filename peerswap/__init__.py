"""Helpers for peer-to-peer Lightning channel swaps: preimages, payments, peer statistics,
short channel ids, start-up checks and logging."""

__version__ = "0.1.0"