"""
Vsesvit — journal archive browser and question assistant
FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import health, chat, journals, search, visualizations
from config import settings
from core.conversation import ConversationRegistry
from core.dataset import load_dataset

# ── Logging ──────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)
logger = logging.getLogger("vsesvit")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Vsesvit starting up…")
    app.state.dataset = load_dataset()
    app.state.conversations = ConversationRegistry(max_conversations=settings.CONVERSATION_LIMIT)
    if not app.state.dataset.loaded:
        logger.warning("Serving without journal data: %s", app.state.dataset.error)
    yield
    logger.info("Vsesvit shutting down.")


# ── App ───────────────────────────────────────────────────────────────────────
app = FastAPI(
    title="Vsesvit — Journal Archive",
    description="Browse, search and ask questions about the digitized Vsesvit journal archive.",
    version="1.0.0",
    lifespan=lifespan,
)

# ── CORS ──────────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Routers ───────────────────────────────────────────────────────────────────
app.include_router(health.router,         prefix="/api")
app.include_router(chat.router,           prefix="/api")
app.include_router(journals.router,       prefix="/api")
app.include_router(search.router,         prefix="/api")
app.include_router(visualizations.router, prefix="/api")
