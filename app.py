"""Pantry Chef Application - Recipe Generation Service.

Single entry point for the recipe generation API:
- Seeds the pantry catalog (SEED_PANTRY)
- Wires the Gemini client, generator, and session orchestrator
- Serves the REST API via uvicorn

Run with: python app.py
"""

import uvicorn

from pantry_chef.api.routes import create_app
from pantry_chef.utils.config import config
from pantry_chef.utils.logger import logger


app = create_app()

if not config.has_api_key:
    logger.warning("GEMINI_API_KEY is not set: every generation request will fail with 'API key not configured'")


if __name__ == "__main__":
    logger.info(f"Starting Pantry Chef on {config.HOST}:{config.PORT} (model: {config.GEMINI_MODEL})")
    logger.info(f"API docs available at: http://localhost:{config.PORT}/docs")
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())
