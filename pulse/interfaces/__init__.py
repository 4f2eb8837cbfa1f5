"""Delivery interfaces of the application."""
