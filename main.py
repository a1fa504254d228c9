# main.py
import logging
import routes
from contextlib import asynccontextmanager
from util.enums import Environment, Color, ErrorMessage
from fastapi import FastAPI, Request
from starlette.concurrency import run_in_threadpool
from starlette.middleware.cors import CORSMiddleware
from config.settings import settings
from config.cache import close_redis, ping_redis
from config.storage import close_s3_client, get_s3_client
from controller.controller_dependencies import get_index_refresher
from controller.image_controller import plain_error
from model.api import HealthResponse
from service.refresh_scheduler import RefreshScheduler
from util.constants import InternalURIs
from util.logger import init_logger

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(fastApi: FastAPI):
    init_logger()
    print(f"{Color.GREEN}Initializing...{Color.RESET}")
    try:
        await ping_redis()
    except Exception as e:
        # Requests answer 500 until the index store is reachable
        logger.error("startup.redis.unreachable err=%s", type(e).__name__)
    try:
        # Build the S3 client off the event loop before the first refresh or request
        await run_in_threadpool(get_s3_client)
    except Exception as e:
        logger.error("startup.blob_store.client_error err=%s", type(e).__name__)

    scheduler = None
    if settings.REFRESH_ENABLED:
        scheduler = RefreshScheduler(
            get_index_refresher(),
            interval_seconds=settings.REFRESH_INTERVAL_SECONDS,
            run_on_start=settings.REFRESH_ON_STARTUP,
        )
        scheduler.start()
    print(f"{Color.BLUE}Server Started{Color.RESET}")

    try:
        yield
    finally:
        if scheduler is not None:
            await scheduler.stop()
        try:
            await close_redis()
        except Exception as e:
            print("Error closing Redis:", e)
        close_s3_client()

        print(f"{Color.RED}Server Shutdown{Color.RESET}")


app: FastAPI = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.ALLOWED_ORIGIN],
    allow_methods=["GET"],
    allow_headers=["Accept"],
)


@app.get(InternalURIs.HEALTHZ, response_model=HealthResponse)
async def healthz() -> HealthResponse:
    return HealthResponse(ok=True)


@app.exception_handler(Exception)
async def unhandled_handler(request: Request, exc: Exception):
    logger.exception("request.unhandled path=%s", request.url.path)
    return plain_error(ErrorMessage.INTERNAL_ERROR)


routes.register_routes(app)

if __name__ == "__main__":
    import uvicorn

    reload = settings.APP_ENV == Environment.DEV
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, reload=reload)
