"""
draftmcp package.

Design intent:
- Host the draft generator and draft writer JSON-RPC services.
- Keep domain modules (note/jekyll) independent from the HTTP layer.
"""
