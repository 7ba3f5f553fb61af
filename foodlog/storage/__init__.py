"""
In-memory storage for restaurants, check-ins, restaurant lists and list items.

Responsibilities:
- Resolve a restaurant by (name, address) before dependent rows are written.
- Scope check-ins and lists to their owning user.
- Keep list membership unique per (list, restaurant).
"""
