"""Reusable patterns shared by the service's verticals.

Each module demonstrates a self-contained pattern that can be adapted
to any domain: rules engines and repository layers.
"""
