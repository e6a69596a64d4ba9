"""
HTTP API for the verse card service.
"""
