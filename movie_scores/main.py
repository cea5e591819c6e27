import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from movie_scores.config import VERSION, API_TITLE, API_DESCRIPTION
from movie_scores.config.logging import setup_logging
from movie_scores.controllers.movie_controller import router as movie_router
from movie_scores.controllers.score_controller import router as score_router
from movie_scores.db.database import engine, Base
from movie_scores.db import models  # noqa: F401  registers the tables on Base

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=VERSION
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# include controllers
app.include_router(movie_router)
app.include_router(score_router)

def init_db():
    Base.metadata.create_all(bind=engine)

@app.on_event("startup")
async def startup_event():
    init_db()
    logger.info("Database schema ready")

@app.get("/health")
def health_check():
    return {"status": "healthy"}
