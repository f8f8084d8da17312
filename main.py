from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from db.redisConnection import redis_client
from utils.config import settings
from routes.candidate_route import candidate_router
app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app.include_router(candidate_router)


@app.get("/")
async def root():
    return {"message": "Candidate profile service"}


@app.on_event("shutdown")
async def shutdown_event():
    """
    Shutdown event to close the Redis connection pool.
    :return:
    """
    await redis_client.aclose()
