"""
Services module - Application business logic layer.

Modules:
- stats: Aggregation engine behind the stats endpoints
"""
