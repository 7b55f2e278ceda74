import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from youthmatch import config
from youthmatch.routes import router as matches_router

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logging.info(f"youthmatch engine {config.ENGINE_VERSION} starting")

app = FastAPI(title="youthmatch")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(matches_router)


@app.get("/health")
def health():
    return {"status": "ok"}
