"""Persistence plumbing: engine/session management and model factories."""
