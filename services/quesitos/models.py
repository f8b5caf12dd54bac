# services/quesitos/models.py
"""
Modelos de dados para extração de quesitos.
"""

from enum import Enum
from dataclasses import dataclass
from typing import List, Optional
from pydantic import BaseModel, Field


class Party(str, Enum):
    """Parte que formulou os quesitos."""
    CLAIMANT = "claimant"
    DEFENDANT = "defendant"
    JUDGE = "judge"

    @property
    def label(self) -> str:
        return _PARTY_LABELS[self]


_PARTY_LABELS = {
    Party.CLAIMANT: "Reclamante",
    Party.DEFENDANT: "Reclamada",
    Party.JUDGE: "Juízo",
}


@dataclass(frozen=True)
class QuestionItem:
    """Quesito extraído de texto colado ou de arquivo."""
    number: int
    text: str


@dataclass(frozen=True)
class Question:
    """Quesito de uma parte, com a resposta do perito."""
    party: Party
    question_number: int
    question: str
    answer: str = ""
    id: Optional[str] = None


# =============================================================================
# Modelos da API
# =============================================================================

class QuestionItemSchema(BaseModel):
    numero: int
    texto: str


class QuestionSchema(BaseModel):
    id: Optional[str] = None
    parte: Party
    numero: int
    quesito: str
    resposta: str = ""


class QuestionExtractionRequest(BaseModel):
    """Request para extração de quesitos a partir de texto colado."""

    texto: str = Field(..., description="Texto com a numeração dos quesitos (ex.: 1), 2., 3 -)")
    parte: Party = Field(default=Party.CLAIMANT, description="Parte que formulou os quesitos")


class QuestionExtractionResponse(BaseModel):
    parte: Party
    itens: List[QuestionItemSchema]
    consolidado: str = Field(..., description="Quesitos renumerados em caixa única")
    total: int


class QuestionMergeRequest(BaseModel):
    """Request para mesclar quesitos extraídos com os já cadastrados."""

    texto: str
    parte: Party = Party.CLAIMANT
    existentes: List[QuestionSchema] = Field(default_factory=list)
