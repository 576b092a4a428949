"""
Portaria - Main Application
Sistema de portaria de condominio: encomendas, visitantes, emprestimos,
funcionarios, ponto, ocorrencias e entregadores
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from portaria.core import settings, configure_logging
from portaria.database import init_db
from portaria.gateway.sql import SqlGateway
from portaria.services import build_front_desk
from portaria.api import (
    session_router,
    sync_router,
    residents_router,
    packages_router,
    received_items_router,
    materials_router,
    visitors_router,
    employees_router,
    occurrences_router,
    time_records_router,
    companies_router,
    delivery_drivers_router,
    delivery_visits_router
)

# Rate limiting
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from portaria.api.session import limiter

configure_logging(settings.LOG_LEVEL, settings.LOG_FILE)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle do aplicativo"""
    # Startup
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"Environment: {settings.ENVIRONMENT}")

    desk = build_front_desk(settings)
    if isinstance(desk.gateway, SqlGateway):
        await init_db(desk.gateway.engine)
        logger.info("Database initialized")

    app.state.desk = desk
    if settings.INITIAL_REFRESH_ON_STARTUP:
        if not await desk.startup():
            logger.error("[REFRESH] Carga inicial falhou; dados serao carregados na proxima atualizacao")

    yield

    # Shutdown
    logger.info("Shutting down...")
    await desk.close()


# Middleware de headers de seguranca
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adiciona headers de seguranca em todas as respostas"""
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        # Identidade do turno nao deve ficar em cache
        if "/session" in request.url.path:
            response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate"
            response.headers["Pragma"] = "no-cache"
        return response


# Cria aplicação
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Condominium front-desk management",
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None
)

# Configura rate limiter na aplicacao
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Headers de seguranca (adicionar ANTES do CORS)
app.add_middleware(SecurityHeadersMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(session_router, prefix="/api")
app.include_router(sync_router, prefix="/api")
app.include_router(residents_router, prefix="/api")
app.include_router(packages_router, prefix="/api")
app.include_router(received_items_router, prefix="/api")
app.include_router(materials_router, prefix="/api")
app.include_router(visitors_router, prefix="/api")
app.include_router(employees_router, prefix="/api")
app.include_router(occurrences_router, prefix="/api")
app.include_router(time_records_router, prefix="/api")
app.include_router(companies_router, prefix="/api")
app.include_router(delivery_drivers_router, prefix="/api")
app.include_router(delivery_visits_router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running"
    }


@app.get("/health")
async def health():
    """Health check"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "portaria.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )
