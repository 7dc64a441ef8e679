"""
Authentication: access tokens, request identity and route guards.
"""
