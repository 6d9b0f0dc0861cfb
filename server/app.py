import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from config import settings
from errors import GameError, InternalFault, status_for
from routers import characters, dm, health, quests, sessions, spells
from services.seed_service import seed_data
from store import GameDataStore

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("D&D server running on port %d", settings.PORT)
    logger.info("Health check: http://localhost:%d/health", settings.PORT)
    if settings.openai_configured:
        logger.info("OpenAI API key configured")
    else:
        logger.warning("OpenAI API key not found, DM chat will use scripted responses")
    yield


app = FastAPI(
    title="Lonely D&D Server",
    version="0.1.0",
    docs_url="/docs",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# In-memory game data, seeded on startup
app.state.store = seed_data(GameDataStore())


@app.exception_handler(GameError)
async def game_error_handler(request: Request, exc: GameError):
    return JSONResponse(status_code=status_for(exc), content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request", "details": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    fault = InternalFault(str(exc))
    return JSONResponse(status_code=status_for(fault), content={"error": fault.message})


app.include_router(health.router)
app.include_router(characters.router)
app.include_router(dm.router)
app.include_router(sessions.router)
app.include_router(quests.router)
app.include_router(spells.router)

# Routes above take precedence over static assets
if os.path.isdir(settings.STATIC_DIR):
    app.mount("/", StaticFiles(directory=settings.STATIC_DIR), name="static")


def run():
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
