"""
Vendor dataset package.

Responsibilities:
- Generate the synthetic street-food vendor dataset once at startup.
- Own that dataset in a single store object handed to request handlers.
- Answer list, lookup, search, stats and favorite-toggle queries.
- Wrap result sequences in the pagination envelope.
"""
