"""
Restaurant discovery.

Responsibilities:
- Validate and sanitize free-text queries and optional coordinates.
- Hand clean input to the places API client.
- Post-filter returned results by rating and price tier.
"""
