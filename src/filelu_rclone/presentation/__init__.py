"""Presentation layer — terminal and desktop front ends."""
