# services/excerpt_extractor/formatter.py
"""
Montagem do bloco de texto com os trechos extraídos.
"""

from typing import Iterable, Sequence

from .models import Category


BLOCK_SEPARATOR = "\n\n---\n\n"


def header_for(category: Category) -> str:
    return f"Trechos extraídos (tipo: {category.value})"


def format_block(category: Category, excerpts: Sequence[str]) -> str:
    """
    Formata os trechos de uma categoria.

    Cabeçalho, linha em branco e trechos separados por linha em branco.
    Retorna string vazia se não houver trechos.
    """
    if not excerpts:
        return ""
    return "\n\n".join([header_for(category), *excerpts])


def join_blocks(blocks: Iterable[str]) -> str:
    """Une blocos de várias categorias com separador "---", ignorando vazios."""
    return BLOCK_SEPARATOR.join(block for block in blocks if block and block.strip())
