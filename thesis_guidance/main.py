import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from thesis_guidance.core.config import Settings, get_settings
from thesis_guidance.core.errors import register_exception_handlers
from thesis_guidance.core.logging_middleware import LoggingMiddleware
from thesis_guidance.db.init_db import init_db
from thesis_guidance.routers.auth import router as auth_router
from thesis_guidance.routers.comments import router as comments_router
from thesis_guidance.routers.dashboard import router as dashboard_router
from thesis_guidance.routers.guidance_sessions import router as guidance_sessions_router
from thesis_guidance.routers.lecturers import router as lecturers_router
from thesis_guidance.routers.students import router as students_router
from thesis_guidance.routers.submissions import router as submissions_router
from thesis_guidance.routers.theses import router as theses_router
from thesis_guidance.routers.users import router as users_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    logging.basicConfig(level=settings.LOG_LEVEL)

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    # every Depends(get_settings) in this app resolves to the factory's settings
    app.dependency_overrides[get_settings] = lambda: settings

    # Middleware
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Health check
    @app.get("/health")
    def health():
        return {"status": "ok"}

    # Include routers
    app.include_router(auth_router, prefix="/auth", tags=["auth"])
    app.include_router(users_router, prefix="/users", tags=["users"])
    app.include_router(students_router, prefix="/students", tags=["students"])
    app.include_router(lecturers_router, prefix="/lecturers", tags=["lecturers"])
    app.include_router(theses_router, prefix="/theses", tags=["theses"])
    app.include_router(
        guidance_sessions_router, prefix="/guidance-sessions", tags=["guidance-sessions"]
    )
    app.include_router(submissions_router, prefix="/submissions", tags=["submissions"])
    app.include_router(comments_router, prefix="/comments", tags=["comments"])

    # Dashboard route carries its own full path
    app.include_router(dashboard_router)

    return app


app = create_app()
