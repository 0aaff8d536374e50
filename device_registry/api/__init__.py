"""
API layer for the device registry.

Exposes the device endpoints under /api/v1/devices plus the /health and
/ready probes.
"""
