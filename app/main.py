# app/main.py

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.logging import configure_logging

# Import all routers
from app.routers import hello, metrics

def create_app() -> FastAPI:
    logger = configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.APP_NAME)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(hello.router)
    app.include_router(metrics.router)

    @app.get("/")
    def read_root():
        return {"message": f"{settings.APP_NAME} is running!"}

    logger.info("%s ready", settings.APP_NAME)
    return app

app = create_app()
