"""
Pydantic schema definitions for API payloads.

Each domain (projects, WRUAs, blog posts, etc.) defines its own models
for request and response bodies.  ``*Create`` models validate new
records, ``*Update`` models carry partial patches where every field is
optional, and ``*Read`` models describe what the API returns.
"""
