"""Geffe keystream generator, its LFSRs, a keystream command and a correlation attack."""

__version__ = "0.1.0"

__all__ = ["lfsr", "generator", "recovery", "cli"]