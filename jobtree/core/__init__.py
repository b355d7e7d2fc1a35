"""
Core module - settings, logging, errors and token authentication.
"""
