"""
Helpers for rendering page artifacts.
"""
