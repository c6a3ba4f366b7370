import logging
import os
import sys

import uvicorn
from dotenv import load_dotenv

from .config import load_settings
from .main import create_api_app, create_plain_app

logger = logging.getLogger("upload_api")


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    load_dotenv()
    variant = os.getenv("UPLOAD_API_VARIANT", "api").lower()
    settings = load_settings(variant)
    if variant == "plain":
        app = create_plain_app(settings)
        logger.info("Server started at http://localhost:%d", settings.port)
        logger.info("Upload endpoint available at POST http://localhost:%d/upload", settings.port)
    else:
        app = create_api_app(settings)
        logger.info("Server v%s started at http://localhost:%d", settings.app_version, settings.port)
        logger.info("Status route available at: GET /")
        logger.info("Upload route available at: POST /upload")

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        proxy_headers=True,
        forwarded_allow_ips=",".join(settings.trusted_proxies),
        log_config=None,
    )


if __name__ == "__main__":
    main()
