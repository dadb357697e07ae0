"""Tests for aiovolumio."""
