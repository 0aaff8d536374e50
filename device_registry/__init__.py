"""
Device Registry — root package.

This package contains the FastAPI app entry point (main.py), API routes,
the device domain model and orchestration service, and the MongoDB and
in-memory store adapters.
"""
