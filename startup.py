import os
import sys
import uvicorn
import logging

# Add the src directory to Python path
current_dir = os.path.dirname(os.path.abspath(__file__))
src_path = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from doctorlisting.core.config import get_settings  # noqa: E402
from doctorlisting.core.structured_logger import configure_logging  # noqa: E402


if __name__ == "__main__":
    settings = get_settings()
    logger = configure_logging(settings)

    host = settings.host
    port = settings.port
    mongo_uri = '✅ set' if os.environ.get('MONGO_URI') else f'default ({settings.database.uri})'
    logger.info(f"{settings.app_name} startup: env={settings.app_env} MONGO_URI={mongo_uri}")
    logger.info(f"Starting uvicorn server on {host}:{port}...")

    try:
        uvicorn.run(
            "doctorlisting.app:app",
            host=host,
            port=port,
            workers=1,
            log_level=settings.logging.level.lower(),
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Shutting down due to keyboard interrupt")
        sys.exit(0)
    except Exception:
        logger.error("CRITICAL: Failed to start application", exc_info=True)
        sys.exit(1)
