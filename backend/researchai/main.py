from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from researchai import __version__
from researchai.api.routes import router
from researchai.config import CORS_ORIGINS
from researchai.db import init_db

app = FastAPI(
    title="ResearchAI",
    version=__version__,
)

# Middleware FIRST
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes AFTER middleware
app.include_router(router)


@app.on_event("startup")
def startup():
    init_db()
