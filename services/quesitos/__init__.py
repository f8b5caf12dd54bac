# services/quesitos/__init__.py
"""
Extração de quesitos numerados (reclamante, reclamada, juízo).

Uso básico:
    from services.quesitos import extract_questions, consolidate

    itens = extract_questions(texto_colado)
    caixa_unica = consolidate(itens)
"""

from .parser import extract_questions, consolidate, merge_questions
from .models import Party, Question, QuestionItem
from .router import router as quesitos_router


__all__ = [
    "extract_questions",
    "consolidate",
    "merge_questions",
    "Party",
    "Question",
    "QuestionItem",
    "quesitos_router",
]
