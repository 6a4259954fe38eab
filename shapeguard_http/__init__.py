"""Boundary integration for shapeguard.

Applies guards where untrusted JSON enters a program: FastAPI request bodies
through typed dependencies and centralized exception handlers, and httpx
responses through fetch helpers. Owns logging and environment configuration
so the core guard library stays free of I/O.
"""
