# services/excerpt_extractor/patterns.py
"""
Regex patterns pré-compilados para segmentação de texto.
"""

import re


# Separador de parágrafos: linha em branco (com ou sem espaços) entre blocos
PARAGRAPH_SEPARATOR = re.compile(r'\n\s*\n|\r\n\s*\r\n')

# Qualquer sequência de espaços em branco (inclui quebras de linha e tabs)
WHITESPACE_RUN = re.compile(r'\s+')

# Fronteira de frase: espaço após ".", "!" ou "?"
SENTENCE_BOUNDARY = re.compile(r'(?<=[.!?])\s+')


# =============================================================================
# Limites de tamanho
# =============================================================================

# Parágrafos com até 20 caracteres são descartados (títulos, numeração)
MIN_PARAGRAPH_LENGTH = 20

# Frases com até 30 caracteres são descartadas
MIN_SENTENCE_LENGTH = 30

# Trecho final precisa ter mais de 50 caracteres
MIN_EXCERPT_LENGTH = 50

# Máximo de trechos por categoria
MAX_EXCERPTS = 5

# Vizinhos curtos anexados como contexto no perfil "defesa"
MAX_CONTEXT_LENGTH = 200


def collapse_whitespace(text: str) -> str:
    """Colapsa espaços, tabs e quebras de linha em um único espaço e apara."""
    return WHITESPACE_RUN.sub(" ", text).strip()
