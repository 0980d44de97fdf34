"""Test utilities for perch applications.

Provides an ASGI test client and sinks that fail on demand::

    from perch.testing import FlakySink, TestClient
"""

from perch.testing.client import TestClient
from perch.testing.sinks import FlakySink

__all__ = ["FlakySink", "TestClient"]
