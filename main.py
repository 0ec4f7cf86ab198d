"""
Entry point for the Car Store Backend
"""

import sys
import os
import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Add src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from config.settings import PORT, LOG_LEVEL

# Configure logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# Import the FastAPI application
from app import app

if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting Car Store Backend on http://localhost:{PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
