# services/excerpt_extractor/ranker.py
"""
Ranqueamento e deduplicação dos trechos relevantes.
"""

from typing import Iterable, List, Sequence, Union

from .classifier import count_matches
from .models import TextUnit
from .patterns import MIN_EXCERPT_LENGTH, MAX_EXCERPTS, MAX_CONTEXT_LENGTH


def deduplicate(contents: Iterable[str]) -> List[str]:
    """Remove duplicatas exatas mantendo a primeira ocorrência."""
    return list(dict.fromkeys(contents))


def rank_excerpts(
    candidates: Iterable[Union[TextUnit, str]],
    required: Sequence[str],
    limit: int = MAX_EXCERPTS
) -> List[str]:
    """
    Seleciona os trechos mais relevantes.

    1. Remove duplicatas (primeira ocorrência vence)
    2. Mantém apenas trechos com mais de 50 caracteres
    3. Ordena pela quantidade de palavras obrigatórias encontradas
       (ordenação estável: empates mantêm a ordem original)
    4. Limita a `limit` trechos

    Args:
        candidates: Unidades que passaram pelo classificador
        required: Palavras obrigatórias da categoria
        limit: Máximo de trechos retornados

    Returns:
        Lista de trechos (pode ser vazia)
    """
    contents = [
        c.content if isinstance(c, TextUnit) else c
        for c in candidates
    ]
    unique = [c for c in deduplicate(contents) if len(c) > MIN_EXCERPT_LENGTH]
    ranked = sorted(unique, key=lambda c: count_matches(c, required), reverse=True)
    return ranked[:limit]


def expand_context(
    excerpts: Sequence[str],
    paragraphs: Iterable[TextUnit],
    blocks: Sequence[str],
    required: Sequence[str],
    max_length: int = MAX_CONTEXT_LENGTH
) -> List[str]:
    """
    Anexa a cada trecho os parágrafos vizinhos curtos.

    Depois de cada trecho entram o bloco anterior e o seguinte do texto,
    desde que tenham menos de `max_length` caracteres e nenhuma palavra
    obrigatória. Usado no perfil "defesa".

    Args:
        excerpts: Trechos já ranqueados
        paragraphs: Parágrafos da segmentação (fornecem a posição de cada trecho)
        blocks: Todos os blocos do texto, na posição do split
        required: Palavras obrigatórias da categoria

    Returns:
        Trechos com os vizinhos intercalados, sem duplicatas
    """
    positions = {}
    for unit in paragraphs:
        positions.setdefault(unit.content, unit.index)

    def is_context(index: int) -> bool:
        if index < 0 or index >= len(blocks):
            return False
        block = blocks[index]
        return bool(block) and len(block) < max_length and count_matches(block, required) == 0

    expanded = []
    for excerpt in excerpts:
        expanded.append(excerpt)
        index = positions.get(excerpt)
        if index is None:
            continue
        for neighbour in (index - 1, index + 1):
            if is_context(neighbour):
                expanded.append(blocks[neighbour])
    return deduplicate(expanded)
