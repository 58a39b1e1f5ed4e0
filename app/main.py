"""Aplicação principal FastAPI"""
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.config import settings
from app.core.database import get_db
from app.core.logging_config import setup_logging
from app.core.exceptions import register_exception_handlers
from app.core.middleware import RequestContextMiddleware
from app.core.rate_limit import limiter
from app.api.v1.api import api_router
import logging

# Configura logging
setup_logging()
logger = logging.getLogger(__name__)

# Cria aplicação FastAPI
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="API REST de estatísticas de campeonatos: classificação, artilharia e dashboard",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Estado do limiter
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
register_exception_handlers(app)

# Middlewares
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["ETag", "Last-Modified"],
)
app.add_middleware(SlowAPIMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(RequestContextMiddleware)

# Inclui routers
app.include_router(api_router, prefix=settings.API_V1_PREFIX)


@app.get("/")
async def root():
    """Endpoint raiz"""
    return {
        "message": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "endpoints": {
            "ranking": f"{settings.API_V1_PREFIX}/statistics/ranking/{{disciplineId}}",
            "top_scorers": f"{settings.API_V1_PREFIX}/statistics/top-scorers/{{disciplineId}}",
            "dashboard": f"{settings.API_V1_PREFIX}/statistics/dashboard/summary",
        }
    }


@app.get("/health")
async def health_check(db: AsyncSession = Depends(get_db)):
    """Health check: aplicação e conexão com o banco"""
    database = "ok"
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"Health check: banco indisponível: {e}")
        database = "error"

    return {
        "status": "healthy" if database == "ok" else "degraded",
        "version": settings.APP_VERSION,
        "database": database,
    }


@app.on_event("startup")
async def startup_event():
    """Cria as tabelas fora de produção e confere se há modalidades cadastradas"""
    logger.info(f"{settings.APP_NAME} v{settings.APP_VERSION} ({settings.ENVIRONMENT}) iniciando...")

    from app.core.database import AsyncSessionLocal, init_db
    from app.models.discipline import Discipline
    from sqlalchemy import select, func

    try:
        if not settings.is_production:
            await init_db()

        async with AsyncSessionLocal() as db:
            disciplines = (await db.execute(select(func.count(Discipline.id)))).scalar() or 0
    except Exception as e:
        logger.warning(f"Banco indisponível no startup: {e}")
        return

    if disciplines:
        logger.info(f"Banco OK: {disciplines} modalidades cadastradas")
    else:
        logger.warning("Nenhuma modalidade cadastrada; classificações ficarão vazias")



@app.on_event("shutdown")
async def shutdown_event():
    """Evento de shutdown"""
    logger.info("Aplicação encerrando...")
    from app.core.database import close_db
    await close_db()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
