#!/usr/bin/env python3
"""
Main entry point for running Blue Horizon API with uvicorn
"""
import os
import sys
import uvicorn
import logging

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    try:
        # Get port from environment variable
        port = int(os.environ.get("PORT", 3001))
        logger.info(f"Starting server on port {port}")

        # Test import before running
        try:
            from blue_horizon.main import app
            logger.info("Successfully imported blue_horizon application")
        except ImportError as e:
            logger.error(f"Failed to import blue_horizon application: {e}")
            sys.exit(1)

        uvicorn.run(
            "blue_horizon.main:app",
            host=os.environ.get("HOST", "0.0.0.0"),
            port=port,
            reload=False,
            log_level="info"
        )
    except Exception as e:
        logger.error(f"Failed to start server: {e}")
        sys.exit(1)
