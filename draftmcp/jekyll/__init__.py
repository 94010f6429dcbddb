"""
Jekyll draft boundary for draftmcp.

Design intent:
- Render post front matter in a fixed field order.
- Write drafts under the site's _drafts directory.
"""
