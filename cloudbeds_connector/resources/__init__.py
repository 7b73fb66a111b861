"""
Cloudbeds Resource Operations

One module per business resource (property, reservation, guest, ...).
Each module declares a RESOURCE name, an operation enum (OPERATIONS) and a
HANDLERS mapping from operation to handler coroutine.
"""

# Resources are discovered by the registry in factory.py - no explicit imports needed
