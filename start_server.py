#!/usr/bin/env python3
"""
Startup script for the Safety Suggestion Portal backend
This script starts the FastAPI server with proper configuration
"""

import uvicorn

from app.config.settings import settings

def main():
    # Fail before binding the port if the signing secret is missing
    settings.require_jwt_secret()

    print("Starting Safety Suggestion Portal Backend...")
    print(f"Host: {settings.HOST}")
    print(f"Port: {settings.PORT}")
    print(f"Reload: {settings.RELOAD}")
    print(f"Environment: {settings.ENVIRONMENT}")
    print("=" * 50)

    # Start the server
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower(),
    )

if __name__ == "__main__":
    main()
