import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator

from app.container import container
from app.entitlement.router import router as entitlement_router
from app.exception import BusinessException
from app.identity.router import router as identity_router
from app.recipe.router import router as recipe_router
from app.usage.router import router as usage_router

# Configuração de logs
logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Ciclo de vida da aplicação"""
    # Startup
    logger.info("🍳 Chef API iniciando...")
    container.wire(modules=[__name__])
    yield
    # Shutdown
    logger.info("🔄 Chef API encerrando...")


app = FastAPI(
    title="Chef - Gerador de Receitas",
    version="1.0.0",
    lifespan=lifespan
)

Instrumentator().instrument(app).expose(app)

@app.exception_handler(BusinessException)
async def business_exception_handler(request: Request, exc: BusinessException):
    logger.info("business_exception", extra={"path": str(request.url), "error_code": exc.error_code})
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

# Registro das rotas
app.include_router(recipe_router)
app.include_router(usage_router)
app.include_router(identity_router)
app.include_router(entitlement_router)
