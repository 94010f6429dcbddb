"""
API orchestration boundary for draftmcp.

Design intent:
- Expose one thin JSON-RPC endpoint per service.
- Translate domain failures into JSON-RPC error envelopes at the boundary.
"""
