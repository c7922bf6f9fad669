"""
Street Food Safari: a mock REST API over synthetic street-food vendor data.

Responsibilities:
- Generate a seeded vendor dataset with nested menus at startup.
- Serve list, detail, menu, search, featured, stats and favorite endpoints.
- Offer a deliberately slow and flaky endpoint for client resilience testing.
"""
