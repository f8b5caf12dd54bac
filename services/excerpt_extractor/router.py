# services/excerpt_extractor/router.py
"""
Endpoints da API para extração de trechos de peças processuais.
"""

from typing import List

from fastapi import APIRouter, File, Form, HTTPException, Query, UploadFile
from fastapi.concurrency import run_in_threadpool

from services.document_text import (
    ExtractionFailedError,
    UnsupportedFormatError,
    extract_text,
)
from utils.logging_config import get_logger
from .extractor import excerpt_extractor, normalize_categories
from .formatter import join_blocks
from .models import (
    Category,
    CategoryInfo,
    ExtractionProfile,
    ExtractionRequest,
    ExtractionResponse,
)


logger = get_logger(__name__)

router = APIRouter(
    prefix="/api/trechos",
    tags=["trechos"],
)


def _parse_categories(categorias: List[str]) -> List[Category]:
    try:
        return normalize_categories(categorias)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _run_extraction(
    texto: str,
    categorias: List[Category],
    perfil: ExtractionProfile
) -> ExtractionResponse:
    results = excerpt_extractor.classify_all(texto, categorias, perfil)
    encontradas = [r.category for r in results if not r.is_empty]
    bloco = join_blocks(r.to_text() for r in results)

    logger.info(
        "Extração de trechos concluída",
        perfil=perfil.value,
        solicitadas=[c.value for c in categorias],
        encontradas=[c.value for c in encontradas],
    )
    return ExtractionResponse(
        texto=bloco,
        encontrado=bool(bloco),
        categorias_encontradas=encontradas,
    )


@router.get(
    "/categorias",
    response_model=List[CategoryInfo],
    summary="Lista categorias e palavras-chave",
)
async def listar_categorias(
    perfil: ExtractionProfile = Query(default=ExtractionProfile.INICIAL)
) -> List[CategoryInfo]:
    """Categorias disponíveis com as palavras-chave do perfil."""
    table = excerpt_extractor.table_for(perfil)
    return [
        CategoryInfo(
            categoria=category,
            nome=category.label,
            palavras_chave=list(table.for_category(category)),
            exclusoes=list(table.exclusions),
        )
        for category in Category
    ]


@router.post(
    "/extrair",
    response_model=ExtractionResponse,
    summary="Extrai trechos de texto colado",
    description="""
    Seleciona parágrafos (ou, na falta deles, frases) que tratam de cada tipo
    solicitado. Para cada tipo são retornados até 5 trechos com mais de 50
    caracteres, ordenados pela quantidade de palavras-chave encontradas.

    Se nada relevante for encontrado, `texto` vem vazio e `encontrado` é false.
    """
)
async def extrair_trechos(request: ExtractionRequest) -> ExtractionResponse:
    categorias = _parse_categories(request.categorias)
    return _run_extraction(request.texto, categorias, request.perfil)


@router.post(
    "/extrair-arquivo",
    response_model=ExtractionResponse,
    summary="Extrai trechos de arquivo PDF, DOCX ou TXT",
    description="""
    O arquivo não é salvo; apenas os trechos identificados são retornados.

    - 415: formato não suportado
    - 422: texto não pôde ser extraído (PDF imagem, arquivo corrompido)
    """
)
async def extrair_trechos_arquivo(
    arquivo: UploadFile = File(...),
    categorias: str = Form(default=Category.INSALUBRIDADE.value),
    perfil: ExtractionProfile = Form(default=ExtractionProfile.INICIAL),
) -> ExtractionResponse:
    wanted = _parse_categories([c for c in categorias.split(",") if c.strip()])

    conteudo = await arquivo.read()
    try:
        documento = await run_in_threadpool(
            extract_text, conteudo, arquivo.filename, arquivo.content_type
        )
    except UnsupportedFormatError as e:
        raise HTTPException(status_code=415, detail=str(e))
    except ExtractionFailedError as e:
        logger.warning("Falha na conversão do arquivo", fonte=e.fonte.value if e.fonte else None)
        raise HTTPException(status_code=422, detail=str(e))

    response = _run_extraction(documento.text, wanted, perfil)
    response.fonte = documento.fonte.value
    response.paginas = documento.paginas
    return response
