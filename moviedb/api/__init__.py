"""
HTTP API for the movie database, built on FastAPI.
"""
