# services/excerpt_extractor/__init__.py
"""
Extração de trechos relevantes de peças processuais.

Seleciona, no texto de uma petição inicial ou contestação, os parágrafos que
tratam de insalubridade, periculosidade ou matéria acidentária, para
preencher os campos do laudo pericial.

Uso básico:
    from services.excerpt_extractor import excerpt_extractor

    bloco = excerpt_extractor.extract(texto, ["insalubridade"])

Módulos:
    - segmenter: divisão em parágrafos e frases
    - classifier: filtro por palavras obrigatórias e de exclusão
    - ranker: deduplicação, ordenação e limite de trechos
    - formatter: montagem do bloco de texto
    - keywords: tabelas de palavras-chave por perfil
    - extractor: pipeline completo e singleton excerpt_extractor
    - router: endpoints FastAPI
"""

from .extractor import ExcerptExtractor, excerpt_extractor, extract_by_types
from .keywords import KeywordTable, KeywordConfigError, load_keyword_tables
from .models import (
    Category,
    ExtractionProfile,
    TextUnit,
    UnitKind,
    Segmentation,
    ClassificationResult,
    ExtractionRequest,
    ExtractionResponse,
)
from .router import router as excerpt_extractor_router


__all__ = [
    # Pipeline
    "ExcerptExtractor",
    "excerpt_extractor",
    "extract_by_types",

    # Palavras-chave
    "KeywordTable",
    "KeywordConfigError",
    "load_keyword_tables",

    # Models
    "Category",
    "ExtractionProfile",
    "TextUnit",
    "UnitKind",
    "Segmentation",
    "ClassificationResult",
    "ExtractionRequest",
    "ExtractionResponse",

    # Router
    "excerpt_extractor_router",
]
