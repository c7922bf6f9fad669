"""
Failure simulation for client resilience testing.

Responsibilities:
- Delay a response by a random amount to exercise client loading states.
- Inject a transient outage on a fraction of calls to exercise retry logic.
"""
