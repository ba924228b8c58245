"""
InsightChef Data
================

Input sanitizing, output normalizing and the shared constants behind them.
"""
