"""Helpers for the Volumio API client."""
