"""
Pydantic models and enums
"""
