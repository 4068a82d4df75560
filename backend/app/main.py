from fastapi import FastAPI
from .core.config import settings
from .core.logging import setup_logging
from .db.session import init_db
from .api.v1 import tasks

setup_logging()

app = FastAPI(title=settings.APP_NAME)
app.include_router(tasks.router, prefix=settings.API_V1_PREFIX)

@app.on_event("startup")
def on_startup():
    init_db()
