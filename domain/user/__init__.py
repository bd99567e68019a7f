"""User domain module.

This domain manages user identity, display name and the dust balance.
"""
