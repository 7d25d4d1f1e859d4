"""
Persistence adapters.

Services depend on ProjectStorage rather than touching the JSON file directly.
"""
