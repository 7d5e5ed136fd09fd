import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from src.api.core.middleware.error_handling import register_exception_handlers
from src.config import CORS_ORIGINS, LOG_LEVEL
from src.lib.db_con import create_db_and_tables
from src.api.routers import (
    # Import Product
    importproductRoute,
)

logger = logging.getLogger(__name__)


# Define app lifespan, this runs once when the app starts and when it shuts down
@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- Runs once on startup ---
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Application starting up...")
    create_db_and_tables()

    yield  # after this, FastAPI starts handling requests

    # --- Runs once on shutdown ---
    logger.info("Application shutting down...")


# Initialize the FastAPI app with the custom lifespan
app = FastAPI(lifespan=lifespan, root_path="/api")
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)


@app.get("/")
def root():
    return {"message": "Storefront admin API"}


# Import Product
app.include_router(importproductRoute.router)
