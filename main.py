# main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from config import get_settings
from logging_config import configure_logging
from routes import students
from store import StudentStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Runs under any server (main() or `uvicorn main:app`); an unopenable log file aborts startup.
    settings = get_settings()
    handler = configure_logging(settings.log_file, settings.log_level)
    logger.info(f"Starting server on port {settings.port}")
    try:
        yield
    finally:
        logging.getLogger().removeHandler(handler)
        handler.close()


def create_app(store: Optional[StudentStore] = None) -> FastAPI:
    app = FastAPI(title="Student API", lifespan=lifespan)
    app.state.store = store if store is not None else StudentStore()
    app.include_router(students.router)
    return app


app = create_app()


def main():
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
