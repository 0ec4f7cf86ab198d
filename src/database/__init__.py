"""
MongoDB connection and repositories
"""
