"""Warden: a local supervisor for a single long-running server process."""
