# main.py
"""
Laudo Pericial - Aplicação FastAPI Principal

Serviços de apoio ao preenchimento do laudo pericial trabalhista:
- Extração de trechos (insalubridade, periculosidade, acidentário)
- Extração de quesitos numerados
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import CORS_ORIGINS, ENV, SERVICE_NAME
from middleware.request_id import RequestIDMiddleware
from utils.logging_config import setup_logging, get_logger

from services.excerpt_extractor import (
    KeywordConfigError,
    excerpt_extractor,
    excerpt_extractor_router,
)
from services.quesitos import quesitos_router


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifecycle events da aplicação.
    Executa na inicialização e no shutdown.
    """
    setup_logging()
    logger.info("Iniciando Laudo Pericial", env=ENV)

    # Palavras-chave inválidas impedem a subida da aplicação
    try:
        tables = excerpt_extractor.tables
    except KeywordConfigError as e:
        logger.error("Falha ao carregar palavras-chave", erro=str(e))
        raise
    logger.info("Palavras-chave carregadas", perfis=[p.value for p in tables])

    yield
    logger.info("Encerrando Laudo Pericial")


app = FastAPI(
    title="Laudo Pericial",
    description="Apoio ao perito na montagem de laudos de insalubridade e periculosidade (NR-15/NR-16)",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestIDMiddleware)


@app.get("/health")
async def health_check():
    """Health check para monitoramento"""
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "env": ENV,
    }


# ==================================================
# ROUTERS DOS SERVIÇOS
# ==================================================

app.include_router(excerpt_extractor_router)
app.include_router(quesitos_router)


# ==================================================
# EXECUÇÃO DIRETA
# ==================================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
