# EduTrack backend entrypoint: student records API for teachers and students.

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.app.api import attendance
from backend.app.api import behavior
from backend.app.api import grades
from backend.app.api import login
from backend.app.api import stats
from backend.app.api import students
from backend.app.core.dev_seed import ensure_demo_data
from backend.app.core.logging import configure_logging
from backend.app.core.settings import get_settings
from backend.app.db.base import Base
from backend.app.db.session import SessionLocal, engine
from backend.app.middlewares.error_handler import add_error_handlers

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(title=settings.app_name, version=settings.api_version)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

add_error_handlers(app)

app.include_router(login.router)
app.include_router(students.router)
app.include_router(attendance.router)
app.include_router(grades.router)
app.include_router(behavior.router)
app.include_router(stats.router)


@app.get("/")
def read_root():
    return {"app": "EduTrack backend", "status": "ok"}


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.on_event("startup")
def init_database():
    Base.metadata.create_all(bind=engine)
    if not settings.seed_demo_data:
        return
    db = SessionLocal()
    try:
        ensure_demo_data(db)
    finally:
        db.close()
