"""
API Layer
=========

FastAPI controllers and HTTP error mapping.
"""
