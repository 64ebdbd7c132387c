import logging
import os

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager
from app.db.init_db import create_database
from app.db.base import Base
from app.db.session import engine
from app.core.config import settings
from app.core.errors import install_exception_handlers
from app.api.v1.router import api_router
from app.utils.uploads import UPLOAD_URL_PREFIX

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: Ensure DB exists and create tables
    create_database()
    Base.metadata.create_all(bind=engine)
    logger.info("%s started", settings.PROJECT_NAME)
    yield


from fastapi.middleware.cors import CORSMiddleware

app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

# Set all CORS enabled origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_exception_handlers(app)

app.include_router(api_router, prefix=settings.API_V1_STR)

os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount(UPLOAD_URL_PREFIX, StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")


@app.get("/health")
def health():
    return {"status": "ok", "message": "Server is running"}
