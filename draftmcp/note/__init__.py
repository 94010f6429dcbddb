"""
Markdown drafting boundary for draftmcp.

Design intent:
- Turn a title/notes pair into a markdown document.
- Stay a pure string transformation until a generation backend exists.
"""
