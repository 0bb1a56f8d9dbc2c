import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from news_api.config import settings
from news_api.database import engine
from news_api.errors import install_exception_handlers
from news_api.middleware import TimingMiddleware
from news_api.routers import articles, topics, users

__version__ = "1.0.0"

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting News API (%s)", settings.APP_ENV)
    yield
    await engine.dispose()

app = FastAPI(
    title="News API",
    description="Articles, comments and votes for a news discussion board",
    version=__version__,
    lifespan=lifespan,
)

# Middleware
app.add_middleware(TimingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_exception_handlers(app)

# Routers
app.include_router(articles.router)
app.include_router(topics.router)
app.include_router(users.router)

@app.get("/health")
async def health():
    return {"status": "healthy", "version": __version__}
