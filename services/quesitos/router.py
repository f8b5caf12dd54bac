# services/quesitos/router.py
"""
Endpoints da API para extração de quesitos.
"""

from typing import List

from fastapi import APIRouter, File, Form, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool

from services.document_text import (
    ExtractionFailedError,
    UnsupportedFormatError,
    extract_text,
)
from utils.logging_config import get_logger
from .models import (
    Party,
    Question,
    QuestionExtractionRequest,
    QuestionExtractionResponse,
    QuestionItemSchema,
    QuestionMergeRequest,
    QuestionSchema,
)
from .parser import consolidate, extract_questions, merge_questions


logger = get_logger(__name__)

router = APIRouter(
    prefix="/api/quesitos",
    tags=["quesitos"],
)


def _build_response(texto: str, parte: Party) -> QuestionExtractionResponse:
    items = extract_questions(texto)
    logger.info("Quesitos extraídos", parte=parte.value, total=len(items))
    return QuestionExtractionResponse(
        parte=parte,
        itens=[QuestionItemSchema(numero=i.number, texto=i.text) for i in items],
        consolidado=consolidate(items),
        total=len(items),
    )


@router.post(
    "/extrair",
    response_model=QuestionExtractionResponse,
    summary="Extrai quesitos numerados de texto colado",
)
async def extrair_quesitos(request: QuestionExtractionRequest) -> QuestionExtractionResponse:
    """
    Reconhece numerações como "1)", "2.", "3 -" e "Quesito 4:".

    Sem numeração, cada linha vira um quesito.
    """
    return _build_response(request.texto, request.parte)


@router.post(
    "/extrair-arquivo",
    response_model=QuestionExtractionResponse,
    summary="Extrai quesitos de arquivo PDF, DOCX ou TXT",
)
async def extrair_quesitos_arquivo(
    arquivo: UploadFile = File(...),
    parte: Party = Form(default=Party.CLAIMANT),
) -> QuestionExtractionResponse:
    conteudo = await arquivo.read()
    try:
        documento = await run_in_threadpool(
            extract_text, conteudo, arquivo.filename, arquivo.content_type
        )
    except UnsupportedFormatError as e:
        raise HTTPException(status_code=415, detail=str(e))
    except ExtractionFailedError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return _build_response(documento.text, parte)


@router.post(
    "/mesclar",
    response_model=List[QuestionSchema],
    summary="Mescla quesitos extraídos com os já cadastrados",
)
async def mesclar_quesitos(request: QuestionMergeRequest) -> List[QuestionSchema]:
    """
    Atualiza o texto dos quesitos de mesmo número preservando as respostas;
    números novos entram com resposta vazia.
    """
    items = extract_questions(request.texto)
    if not items:
        raise HTTPException(
            status_code=422,
            detail="Nenhum quesito detectado. Verifique a numeração (ex.: 1), 2., 3 -)."
        )

    existing = [
        Question(
            party=q.parte,
            question_number=q.numero,
            question=q.quesito,
            answer=q.resposta,
            id=q.id,
        )
        for q in request.existentes
    ]
    merged = merge_questions(existing, items, request.parte)
    return [
        QuestionSchema(
            id=q.id,
            parte=q.party,
            numero=q.question_number,
            quesito=q.question,
            resposta=q.answer,
        )
        for q in merged
    ]
