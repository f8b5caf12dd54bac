# services/excerpt_extractor/classifier.py
"""
Classificador de relevância por palavras-chave.

Um trecho é relevante para a categoria quando contém ao menos uma palavra
obrigatória e nenhuma palavra de exclusão. A comparação é por substring,
sem diferenciar maiúsculas de minúsculas.
"""

from typing import Iterable, List, Sequence

from .models import TextUnit


def is_relevant(
    content: str,
    required: Sequence[str],
    exclusions: Sequence[str] = ()
) -> bool:
    """
    Verifica se o conteúdo é estritamente relevante.

    Args:
        content: Texto do parágrafo ou frase
        required: Palavras obrigatórias da categoria (minúsculas)
        exclusions: Palavras de exclusão globais (minúsculas)

    Returns:
        True se há palavra obrigatória e nenhuma exclusão
    """
    lower = content.lower()
    if not any(keyword in lower for keyword in required):
        return False
    return not any(word in lower for word in exclusions)


def count_matches(content: str, required: Sequence[str]) -> int:
    """Número de palavras obrigatórias distintas presentes no conteúdo."""
    lower = content.lower()
    return sum(1 for keyword in set(required) if keyword in lower)


def filter_relevant(
    units: Iterable[TextUnit],
    required: Sequence[str],
    exclusions: Sequence[str] = ()
) -> List[TextUnit]:
    return [unit for unit in units if is_relevant(unit.content, required, exclusions)]
