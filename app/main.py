from fastapi import FastAPI

from app.logging_config import configure_logging
from app.matching.catalog_router import router as catalog_router
from app.matching.router import router as matching_router

configure_logging()

app = FastAPI(title="FitMatch", version="0.1.0")
app.include_router(matching_router)
app.include_router(catalog_router)


@app.get("/")
async def root() -> dict:
    return {
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
        "matching": {
            "score": "/matching/score",
            "rank": "/matching/rank",
            "starters": "/matching/starters",
            "user_matches": "/matching/users/{user_id}/matches",
            "catalog": "/matching/catalog",
        },
    }


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
