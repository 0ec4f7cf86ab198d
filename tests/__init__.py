"""
Car Store Backend test suite
"""
