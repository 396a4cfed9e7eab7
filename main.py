import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import Settings, settings
from app.core.exceptions import ContactAPIError, contact_api_error_handler
from app.database.database import Database
from app.routers import contacts, greetings

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO"):
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(app_settings: Settings) -> FastAPI:
    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        description="Contact form submission and listing API.",
        version=app_settings.VERSION,
    )
    app.add_exception_handler(ContactAPIError, contact_api_error_handler)

    @app.on_event("startup")
    async def startup_event():
        """
        Opens the connection pool shared by every request.
        Tables are created only when DB_CREATE_TABLES is set.
        """
        database = Database(app_settings)
        app.state.database = database
        logger.info(f"Using {database.url.get_backend_name()} database at {database.url.host or database.url.database}")
        if app_settings.DB_CREATE_TABLES:
            await database.create_all()
            logger.info("Database tables created")

    @app.on_event("shutdown")
    async def shutdown_event():
        database = getattr(app.state, "database", None)
        if database is not None:
            await database.dispose()

    # Adding CORS middleware for cross-origin requests
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(greetings.router, tags=["Greetings"])
    app.include_router(contacts.router, tags=["Contacts"])
    return app


configure_logging(settings.LOG_LEVEL)
app = create_app(settings)


def main(app_settings: Settings = settings):
    # In production the process manager imports main:app itself
    if app_settings.PROD:
        logger.info("PROD is set, not starting the built-in server")
        return
    logger.info(f"Server Started at port {app_settings.PORT}")
    uvicorn.run(create_app(app_settings), host=app_settings.HOST, port=app_settings.PORT)


if __name__ == "__main__":
    main()
