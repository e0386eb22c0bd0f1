"""Business modules for the login API.

Each module is self-contained with its own models, protocols and
domain logic.
"""
