"""Domain layer.

Entities, value objects and validation rules, decoupled from persistence
and from any transport layer.
"""
