from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import logging

from recipebox.api.routes import plans, recipes, shopping, users
from recipebox.infra.store import JsonFileStore, StorageError
from recipebox.utilities.config import SEED_DEMO_DATA, STORE_FILE
from recipebox.utilities.demo_data import seed_demo_data

# Logging
logger = logging.getLogger("recipebox_app")

# Initialize FastAPI app
app = FastAPI(title="Family Recipe Box API")
app.state.store = JsonFileStore(STORE_FILE)

# Include routers
app.include_router(recipes.router)
app.include_router(users.router)
app.include_router(plans.router)
app.include_router(shopping.router)


@app.on_event("startup")
async def _startup_seed_demo_data():
    """Create the demo family on first start."""
    if not SEED_DEMO_DATA:
        return
    try:
        if await seed_demo_data(app.state.store):
            logger.info("Demo data written to %s", STORE_FILE)
    except StorageError as e:
        logger.error("Failed to seed demo data: %s", e)


@app.exception_handler(StorageError)
async def _storage_error_handler(request: Request, exc: StorageError):
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": str(exc)})


@app.get("/api/health")
def health():
    return {"status": "ok"}
