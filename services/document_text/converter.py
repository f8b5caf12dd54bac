# services/document_text/converter.py
"""
Conversão de arquivos enviados (PDF, DOCX, TXT) em texto bruto.

Pipeline:
1. Detectar o formato pelo MIME type ou pela extensão
2. Extrair o texto (PyMuPDF para PDF, python-docx para DOCX)
3. Remover caracteres de controle e Unicode invisível

Falhas são reportadas como UnsupportedFormatError ou ExtractionFailedError,
antes de qualquer classificação do texto.
"""

import io
import re
import logging
from typing import Iterator, Optional

import fitz
from docx import Document
from docx.table import Table

from utils.pymupdf_lock import pymupdf_lock
from .models import (
    MIME_TYPES,
    DocumentFormat,
    DocumentText,
    ExtractionFailedError,
    UnsupportedFormatError,
)


logger = logging.getLogger(__name__)


# Caracteres de controle ASCII (exceto \n e \r)
CONTROL_CHARS = re.compile(r'[\x00-\x09\x0b\x0c\x0e-\x1f]')

# Caracteres Unicode invisíveis (zero-width, BOM, soft hyphen)
INVISIBLE_UNICODE = re.compile(r'[\u200B-\u200D\u2060\uFEFF\u00AD]')


def detect_format(filename: Optional[str], content_type: Optional[str] = None) -> DocumentFormat:
    """
    Identifica o formato do arquivo.

    O MIME type tem prioridade; a extensão é usada quando o navegador
    envia um tipo genérico (ex: application/octet-stream).

    Raises:
        UnsupportedFormatError: se não for PDF, DOCX ou TXT
    """
    if content_type:
        mime = content_type.split(";")[0].strip().lower()
        if mime in MIME_TYPES:
            return MIME_TYPES[mime]

    name = (filename or "").lower()
    if "." in name:
        extension = name.rsplit(".", 1)[1]
        try:
            return DocumentFormat(extension)
        except ValueError:
            pass

    raise UnsupportedFormatError(filename, content_type)


def clean_text(text: str) -> str:
    """Remove caracteres de controle e invisíveis, preservando quebras de linha."""
    if not text:
        return ""
    text = text.replace("\x00", "")
    text = CONTROL_CHARS.sub(" ", text)
    return INVISIBLE_UNICODE.sub("", text)


def _extract_pdf(content: bytes) -> DocumentText:
    """Extrai texto com PyMuPDF, página a página."""
    try:
        with pymupdf_lock:
            fitz.TOOLS.mupdf_warnings(False)
            doc = fitz.open(stream=content, filetype="pdf")
            try:
                num_paginas = len(doc)
                textos = [page.get_text("text") for page in doc]
            finally:
                doc.close()
    except Exception as e:
        logger.warning(f"Falha ao abrir PDF: {e}")
        raise ExtractionFailedError(
            "Falha ao extrair PDF. Verifique se o arquivo não está corrompido.",
            DocumentFormat.PDF,
        ) from e

    text = "\n\n".join(t.strip() for t in textos if t and t.strip())
    if not text:
        raise ExtractionFailedError(
            "PDF sem texto visível. Se o PDF for imagem, cole o texto manualmente ou use TXT/DOCX.",
            DocumentFormat.PDF,
        )
    return DocumentText(text=text, fonte=DocumentFormat.PDF, paginas=num_paginas)


def _iter_docx_blocks(container) -> Iterator[str]:
    """
    Textos dos parágrafos na ordem do documento.

    Tabelas são percorridas linha a linha; cada parágrafo de célula vira um
    bloco. Células mescladas aparecem uma única vez.
    """
    for item in container.iter_inner_content():
        if isinstance(item, Table):
            seen = set()
            for row in item.rows:
                for cell in row.cells:
                    if cell._tc in seen:
                        continue
                    seen.add(cell._tc)
                    yield from _iter_docx_blocks(cell)
        else:
            yield item.text


def _extract_docx(content: bytes) -> DocumentText:
    """Extrai o texto dos parágrafos e tabelas com python-docx."""
    try:
        doc = Document(io.BytesIO(content))
    except Exception as e:
        logger.warning(f"Falha ao abrir DOCX: {e}")
        raise ExtractionFailedError(
            "Falha ao extrair DOCX. Tente colar o texto ou enviar um arquivo TXT.",
            DocumentFormat.DOCX,
        ) from e

    text = "\n\n".join(_iter_docx_blocks(doc))
    return DocumentText(text=text.strip(), fonte=DocumentFormat.DOCX)


def _extract_txt(content: bytes) -> DocumentText:
    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError:
        text = content.decode("latin-1")
    return DocumentText(text=text, fonte=DocumentFormat.TXT)


_EXTRACTORS = {
    DocumentFormat.PDF: _extract_pdf,
    DocumentFormat.DOCX: _extract_docx,
    DocumentFormat.TXT: _extract_txt,
}


def extract_text(
    content: bytes,
    filename: Optional[str] = None,
    content_type: Optional[str] = None,
    max_size: Optional[int] = None
) -> DocumentText:
    """
    Converte o conteúdo de um arquivo em texto.

    Args:
        content: Bytes do arquivo
        filename: Nome original (usado para detectar a extensão)
        content_type: MIME type informado no upload
        max_size: Tamanho máximo em bytes (padrão: MAX_UPLOAD_SIZE)

    Returns:
        DocumentText com o texto limpo

    Raises:
        UnsupportedFormatError: formato diferente de PDF/DOCX/TXT
        ExtractionFailedError: arquivo vazio, grande demais ou ilegível
    """
    fonte = detect_format(filename, content_type)

    if max_size is None:
        from config import MAX_UPLOAD_SIZE
        max_size = MAX_UPLOAD_SIZE

    if not content:
        raise ExtractionFailedError("Arquivo vazio.", fonte)
    if len(content) > max_size:
        raise ExtractionFailedError(
            f"Arquivo excede o tamanho máximo de {max_size // (1024 * 1024)}MB.",
            fonte,
        )

    result = _EXTRACTORS[fonte](content)
    result.text = clean_text(result.text)

    logger.info(
        f"Texto extraído de {fonte.value}: {len(content)} bytes -> {len(result.text)} chars"
    )
    return result
