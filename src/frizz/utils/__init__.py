"""Shared runtime helpers: progress, debug tracing and event loop management."""
