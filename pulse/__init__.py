"""Pulse: identity tokens, per-user notifications and realtime delivery."""
