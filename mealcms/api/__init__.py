"""
Meal CMS REST API.

Provides DRF ViewSets for:
- Component schemas (read-only + validate action)
- Content-type schemas (read-only + validate action)
"""
