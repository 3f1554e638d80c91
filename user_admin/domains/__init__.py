"""Domain layer (view state, lifecycle events and the reducer).

Domain modules should not depend on UI or perform IO. The remote API is reached
only through the orchestration layer, which feeds events into a store.
"""
