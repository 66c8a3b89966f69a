"""Domain layer: guarded entities, events, messages and values.

Entities are mutable under their field rules; events and messages are
immutable once constructed; values wrap a single re-validated field.
"""
