# services/quesitos/parser.py
"""
Parser de quesitos numerados colados pelo perito.

Aceita numerações soltas como "1)", "2.", "3 -", "Quesito 4:". Quando não
há numeração reconhecível, cada linha não vazia vira um quesito.
"""

import re
from typing import Dict, Iterable, List

from .models import Party, Question, QuestionItem


# Início de quesito: começo do texto ou nova linha, "quesito" opcional, número
QUESTION_START = re.compile(r'(?:^|\n)\s*(?:quesito\s*)?(\d+)[.)\-:\s]+', re.IGNORECASE)

# Prefixo de numeração a remover do texto do quesito
QUESTION_PREFIX = re.compile(r'^(?:quesito\s*)?\d+[.)\-:\s]+', re.IGNORECASE)

LINE_BREAKS = re.compile(r'\n+')


def extract_questions(text: str) -> List[QuestionItem]:
    """
    Extrai os quesitos numerados de um texto.

    Cada quesito vai do seu número até o número seguinte. Texto anterior
    ao primeiro número é ignorado.

    Args:
        text: Texto colado ou extraído de arquivo

    Returns:
        Lista de QuestionItem na ordem do texto (vazia se texto em branco)
    """
    normalized = (text or "").replace("\r", "")
    if not normalized.strip():
        return []

    matches = list(QUESTION_START.finditer(normalized))

    if not matches:
        lines = [line.strip() for line in LINE_BREAKS.split(normalized)]
        return [
            QuestionItem(number=idx + 1, text=line)
            for idx, line in enumerate(l for l in lines if l)
        ]

    items = []
    for i, match in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(normalized)
        chunk = normalized[match.start():end].strip()
        cleaned = QUESTION_PREFIX.sub("", chunk, count=1).strip()
        items.append(QuestionItem(number=int(match.group(1)), text=cleaned))
    return items


def consolidate(items: Iterable[QuestionItem]) -> str:
    """Renumera os quesitos a partir de 1, um por linha: "1) texto"."""
    return "\n".join(f"{idx}) {item.text}" for idx, item in enumerate(items, start=1))


def merge_questions(
    existing: Iterable[Question],
    items: Iterable[QuestionItem],
    party: Party
) -> List[Question]:
    """
    Mescla quesitos extraídos com os já cadastrados para a parte.

    Quesitos com o mesmo número têm o texto atualizado e a resposta
    preservada; números novos entram com resposta vazia. Quesitos de
    outras partes são ignorados.

    Returns:
        Quesitos da parte ordenados pelo número
    """
    by_number: Dict[int, Question] = {
        q.question_number: q for q in existing if q.party == party
    }

    for item in items:
        current = by_number.get(item.number)
        by_number[item.number] = Question(
            party=party,
            question_number=item.number,
            question=item.text,
            answer=current.answer if current else "",
            id=current.id if current else None,
        )

    return [by_number[n] for n in sorted(by_number)]
