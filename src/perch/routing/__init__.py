"""Routing — ordered pattern table with typed placeholder extraction.

Patterns are compiled once at registration and resolved in registration
order, with greedy patterns deferred behind any more specific match.
"""
