"""
Main entry point for the chat service.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn chat_service.fastapi_app:create_fastapi_app --factory --port 8000
"""

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from chat_service.config.settings import get_config

if __name__ == "__main__":
    config = get_config()
    debug = config.APP_ENV == "development"

    print(f"Starting chat service in {config.APP_ENV} mode...")
    print(f"Server running on http://{config.HOST}:{config.PORT}")

    uvicorn.run(
        "chat_service.fastapi_app:create_fastapi_app",
        factory=True,
        host=config.HOST,
        port=config.PORT,
        reload=debug,
        log_level="info" if debug else "warning",
    )
