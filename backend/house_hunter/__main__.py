# house_hunter/__main__.py
import logging

import uvicorn

from house_hunter.core.config import settings


def main() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info("server is running on port %s", settings.PORT)
    uvicorn.run(
        "house_hunter.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL,
    )


if __name__ == "__main__":
    main()
