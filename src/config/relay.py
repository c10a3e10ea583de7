"""Broadcast policy configuration (env-resolved constants only)."""

from __future__ import annotations

from .env import get_bool

# Dashboards that also publish expect to see their own metrics echoed back,
# so broadcasts go to every connection including the sender unless disabled.
RELAY_INCLUDE_SENDER: bool = get_bool("RELAY_INCLUDE_SENDER", True)

# Reply with an error envelope when a frame is rejected (malformed, oversized
# or rate limited). Unknown envelope types never get a reply.
RELAY_REPORT_MALFORMED: bool = get_bool("RELAY_REPORT_MALFORMED", True)

__all__ = ["RELAY_INCLUDE_SENDER", "RELAY_REPORT_MALFORMED"]
