"""
Configuration settings for the Car Store Backend
"""

import os
import logging

logger = logging.getLogger(__name__)

# Database configuration
MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27018")
MONGODB_DATABASE = os.getenv("MONGODB_DATABASE", "carstore")
MONGODB_COLLECTION = os.getenv("MONGODB_COLLECTION", "cars")
MONGODB_SERVER_SELECTION_TIMEOUT_MS = int(os.getenv("MONGODB_SERVER_SELECTION_TIMEOUT_MS", 5000))

# Deadline applied to every storage call made while serving a request
REQUEST_TIMEOUT_SECONDS = float(os.getenv("REQUEST_TIMEOUT_SECONDS", 10))

# Server configuration
PORT = int(os.getenv("PORT", 8080))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# CORS settings
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]
ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
ALLOWED_HEADERS = ["Origin", "Content-Type", "Authorization"]

# Validate configuration
if REQUEST_TIMEOUT_SECONDS <= 0:
    raise ValueError("REQUEST_TIMEOUT_SECONDS must be positive")
if not MONGODB_DATABASE or not MONGODB_COLLECTION:
    raise ValueError("MONGODB_DATABASE and MONGODB_COLLECTION must not be empty")

logger.info(f"Database: {MONGODB_DATABASE}.{MONGODB_COLLECTION}")
