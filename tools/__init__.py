"""Internal tooling for repository guard checks.

Hosts checks that keep the ``shapeguard`` core a pure classifier library:
- No logging, I/O, networking or process modules imported by the core
- No use of print

These run through ``python -m tools.guard``.
"""
