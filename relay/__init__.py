# relay/__init__.py
"""License Lookup Relay HTTP package.

FastAPI layer that validates inbound lookups, forwards them to the
Illinois, Colorado and California licensing registries through ``lookup``,
and returns JSON.
"""

__version__ = "1.0.0"
