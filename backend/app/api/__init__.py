"""
InsightChef HTTP API.
"""
