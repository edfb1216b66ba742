from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from config import settings
from auth.utils import get_secret_key
from core.errors import register_exception_handlers
from core.logging_config import setup_logging
from database.connection import init_db, close_client
from users.routes import router as user_router

# =====================================================
# * Global logging
# =====================================================
logger = setup_logging()

# =====================================================
# * Lifecycle: the store must be reachable before serving
# =====================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    get_secret_key()
    app.state.db = init_db()
    logger.info(f"🌍 {settings.PROJECT_NAME} backend started in '{settings.ENV}' mode.")
    yield
    close_client()
    logger.info("🛑 Database connection closed.")

# =====================================================
# * Application
# =====================================================
app = FastAPI(
    title=f"{settings.PROJECT_NAME} Backend",
    version=settings.VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# =====================================================
# * Request logging
# =====================================================
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = datetime.now(timezone.utc)
    response = await call_next(request)
    process_time = (datetime.now(timezone.utc) - start_time).total_seconds()
    logger.info(f"{request.method} {request.url.path} - {response.status_code} - {process_time:.4f}s")
    return response

# =====================================================
# * Routes
# =====================================================
app.include_router(user_router, prefix="/users", tags=["Users"])

@app.get("/", summary="Liveness check", response_class=PlainTextResponse)
def root():
    logger.info("Request to / endpoint successful")
    return "Hello, world!"


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT)
