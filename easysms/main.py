import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
import uvicorn

from easysms.config import settings
from easysms.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    logger.info(
        "SMS service started, default gateways: %s (strategy: %s)",
        ", ".join(settings.default_gateways) or "-",
        settings.default_strategy,
    )
    yield


app = FastAPI(title="EasySms API", lifespan=lifespan)


def setup_routes():
    from easysms.api import api_router
    app.include_router(api_router)


setup_routes()


@app.get("/health")
def health_check():
    return {"status": "healthy"}


def main():
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
