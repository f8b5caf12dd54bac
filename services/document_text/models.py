# services/document_text/models.py
"""
Modelos e exceções da conversão de documentos em texto.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional


class DocumentFormat(str, Enum):
    PDF = "pdf"
    DOCX = "docx"
    TXT = "txt"


MIME_TYPES = {
    "application/pdf": DocumentFormat.PDF,
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": DocumentFormat.DOCX,
    "text/plain": DocumentFormat.TXT,
}


@dataclass
class DocumentText:
    """Resultado da conversão de um arquivo em texto"""
    text: str
    fonte: DocumentFormat
    paginas: Optional[int] = None


class DocumentTextError(Exception):
    """Erro base da conversão de documentos."""


class UnsupportedFormatError(DocumentTextError):
    """Formato de arquivo não suportado (aceita PDF, DOCX e TXT)."""

    def __init__(self, filename: Optional[str] = None, content_type: Optional[str] = None):
        self.filename = filename
        self.content_type = content_type
        super().__init__(
            f"Formato não suportado: {filename or content_type or 'desconhecido'}. "
            f"Use PDF, DOCX ou TXT."
        )


class ExtractionFailedError(DocumentTextError):
    """O arquivo é de formato suportado mas o texto não pôde ser extraído."""

    def __init__(self, message: str, fonte: Optional[DocumentFormat] = None):
        self.fonte = fonte
        super().__init__(message)
