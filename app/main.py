from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware
from starlette.responses import JSONResponse

from app.api.main import api_router
from app.core.errors import UpstreamFailure, ValidationError
from app.core.logging import configure_logging, get_logger
from app.core.settings import settings
from app.db import init_db
from app.middlewares.telemetry import RequestContextMiddleware
from app.version import APP_VERSION, BUILD_TIME_UTC, GIT_SHA, SERVICE_NAME

configure_logging(json=settings.LOG_JSON, level=settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # sem migrations: a tabela é criada no boot
    init_db()
    get_logger().info("app.startup", service=SERVICE_NAME, env=settings.APP_ENV.value)
    yield


app = FastAPI(title=SERVICE_NAME, version=APP_VERSION, debug=settings.DEBUG, lifespan=lifespan)

# --- Middlewares de contexto/log
app.add_middleware(RequestContextMiddleware)

# --- CORS
allowed_origins = []
for host in settings.ALLOWED_HOSTS.split(","):
    _host = host.strip()
    if not _host:
        continue
    # aceita tanto com quanto sem protocolo
    if _host.startswith("http"):
        allowed_origins.append(_host)
    else:
        allowed_origins.append(f"http://{_host}")
        allowed_origins.append(f"https://{_host}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins or ["*"] if settings.DEBUG else allowed_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# --- Segurança: HTTPS only em prod
if settings.APP_ENV.value == "prod":
    app.add_middleware(HTTPSRedirectMiddleware)


@app.middleware("http")
async def security_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "no-referrer"
    return response


# --- Erros de domínio
@app.exception_handler(ValidationError)
async def validation_error_handler(_: Request, exc: ValidationError):
    return PlainTextResponse(exc.message, status_code=400)


@app.exception_handler(UpstreamFailure)
async def upstream_failure_handler(request: Request, exc: UpstreamFailure):
    get_logger().error(
        "upstream.failure", path=request.url.path, status_code=exc.status_code
    )
    return PlainTextResponse(exc.message, status_code=exc.status_code)


app.include_router(api_router)


# --- Endpoints
@app.get("/healthz", tags=["ops"])
def healthz():
    get_logger().info("health.check")
    return {"status": "ok", "env": settings.APP_ENV, "version": APP_VERSION}


@app.get("/version", tags=["ops"])
def version():
    return {
        "service": SERVICE_NAME,
        "version": APP_VERSION,
        "git_sha": GIT_SHA,
        "build_time_utc": BUILD_TIME_UTC,
        "env": settings.APP_ENV,
        "debug": settings.DEBUG,
    }


@app.exception_handler(404)
async def not_found(_, __):
    return JSONResponse({"detail": "Not Found"}, status_code=404)
