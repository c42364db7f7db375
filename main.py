import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from fastapi.middleware.cors import CORSMiddleware
from selphlyze.core.config import settings
from selphlyze.core.database import Base, engine
from selphlyze.models.analytics_db.analytics_db import AnalyticsEvent  # noqa: F401
from selphlyze.models.session_db.session_db import TestSession  # noqa: F401
from selphlyze.routes.analytics.analytics_routers import analytics_router
from selphlyze.routes.quiz.quiz_routers import quiz_router
from selphlyze.routes.session.session_routers import session_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 Starting Selphlyze API...")
    Base.metadata.create_all(bind=engine)
    yield
    logger.info("🛑 Shutting down Selphlyze API...")


app = FastAPI(title="Selphlyze API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(quiz_router)
app.include_router(session_router)
app.include_router(analytics_router)


@app.get("/", response_class=HTMLResponse)
async def read_root():
    return """
    <html>
        <head>
            <title>Selphlyze</title>
        </head>
        <body>
            <h1>Welcome to the Selphlyze API!</h1>
            <p>See the API documentation <a href="/docs">here</a>.</p>
        </body>
    </html>
    """
