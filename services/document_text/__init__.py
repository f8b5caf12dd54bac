# services/document_text/__init__.py
"""
Conversão de arquivos enviados em texto bruto.

Uso básico:
    from services.document_text import extract_text, DocumentTextError

    try:
        documento = extract_text(conteudo, filename="inicial.pdf")
    except UnsupportedFormatError:
        ...  # formato não aceito
    except ExtractionFailedError:
        ...  # PDF imagem, DOCX corrompido etc.
"""

from .converter import extract_text, detect_format, clean_text
from .models import (
    DocumentFormat,
    DocumentText,
    DocumentTextError,
    UnsupportedFormatError,
    ExtractionFailedError,
)


__all__ = [
    "extract_text",
    "detect_format",
    "clean_text",
    "DocumentFormat",
    "DocumentText",
    "DocumentTextError",
    "UnsupportedFormatError",
    "ExtractionFailedError",
]
