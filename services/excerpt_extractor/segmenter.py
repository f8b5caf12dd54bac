# services/excerpt_extractor/segmenter.py
"""
Segmentação do texto de uma peça em parágrafos e frases.

Os parágrafos são a unidade preferida de extração; as frases servem de
fallback quando nenhum parágrafo é relevante para a categoria.
"""

from typing import List

from .models import Segmentation, TextUnit, UnitKind
from .patterns import (
    PARAGRAPH_SEPARATOR,
    SENTENCE_BOUNDARY,
    MIN_PARAGRAPH_LENGTH,
    MIN_SENTENCE_LENGTH,
    collapse_whitespace,
)


def split_blocks(text: str) -> List[str]:
    """Todos os blocos entre linhas em branco, colapsados, sem descartar nenhum."""
    if not text or not text.strip():
        return []
    return [collapse_whitespace(block) for block in PARAGRAPH_SEPARATOR.split(text)]


def split_paragraphs(text: str) -> List[TextUnit]:
    """
    Divide o texto em parágrafos separados por linha em branco.

    Cada parágrafo tem os espaços internos colapsados. Parágrafos com até
    20 caracteres são descartados.
    """
    units = []
    for index, content in enumerate(split_blocks(text)):
        if len(content) > MIN_PARAGRAPH_LENGTH:
            units.append(TextUnit(content=content, index=index, kind=UnitKind.PARAGRAPH))
    return units


def split_sentences(text: str) -> List[TextUnit]:
    """
    Divide o texto inteiro (com espaços colapsados) em frases.

    Frases com até 30 caracteres são descartadas.
    """
    normalized = collapse_whitespace(text or "")
    if not normalized:
        return []

    units = []
    for index, piece in enumerate(SENTENCE_BOUNDARY.split(normalized)):
        content = piece.strip()
        if len(content) > MIN_SENTENCE_LENGTH:
            units.append(TextUnit(content=content, index=index, kind=UnitKind.SENTENCE))
    return units


def segment(text: str) -> Segmentation:
    return Segmentation(
        paragraphs=tuple(split_paragraphs(text)),
        sentences=tuple(split_sentences(text)),
        blocks=tuple(split_blocks(text)),
    )
