# services/excerpt_extractor/models.py
"""
Modelos de dados para a extração de trechos por tipo de adicional.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from pydantic import BaseModel, Field, ConfigDict


class Category(str, Enum):
    """
    Tipos de trecho que podem ser extraídos de uma peça.

    - insalubridade: condições insalubres (NR-15)
    - periculosidade: condições perigosas (NR-16)
    - acidentario: acidente de trabalho / doença ocupacional
    """
    INSALUBRIDADE = "insalubridade"
    PERICULOSIDADE = "periculosidade"
    ACIDENTARIO = "acidentario"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @classmethod
    def parse(cls, name: str) -> "Category":
        """
        Converte um nome (português ou alias em inglês) em Category.

        Raises:
            ValueError: se o nome não corresponde a nenhuma categoria
        """
        key = (name or "").strip().lower()
        category = _CATEGORY_ALIASES.get(key)
        if category is None:
            raise ValueError(f"Categoria desconhecida: {name!r}")
        return category


_CATEGORY_LABELS = {
    Category.INSALUBRIDADE: "Insalubridade",
    Category.PERICULOSIDADE: "Periculosidade",
    Category.ACIDENTARIO: "Acidentário",
}

_CATEGORY_ALIASES = {
    "insalubridade": Category.INSALUBRIDADE,
    "insalubrity": Category.INSALUBRIDADE,
    "periculosidade": Category.PERICULOSIDADE,
    "periculosity": Category.PERICULOSIDADE,
    "acidentario": Category.ACIDENTARIO,
    "acidentário": Category.ACIDENTARIO,
    "work_accident": Category.ACIDENTARIO,
    "work-accident": Category.ACIDENTARIO,
}


class ExtractionProfile(str, Enum):
    """
    Conjunto de tabelas de palavras-chave a usar.

    - inicial: listas restritivas da petição inicial, com exclusões globais
    - defesa: listas amplas da contestação, sem exclusões
    """
    INICIAL = "inicial"
    DEFESA = "defesa"


class UnitKind(str, Enum):
    PARAGRAPH = "paragraph"
    SENTENCE = "sentence"


@dataclass(frozen=True)
class TextUnit:
    """Parágrafo ou frase do texto, com a posição original."""

    content: str
    index: int
    kind: UnitKind = UnitKind.PARAGRAPH

    def __len__(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class Segmentation:
    """As duas partições candidatas de um texto."""

    paragraphs: Tuple[TextUnit, ...] = ()
    sentences: Tuple[TextUnit, ...] = ()
    # Todos os blocos do texto, na posição do split (vazios inclusive)
    blocks: Tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.paragraphs and not self.sentences


@dataclass(frozen=True)
class ClassificationResult:
    """
    Trechos selecionados para uma categoria.

    No máximo 5 trechos relevantes; no perfil "defesa" podem vir seguidos
    de parágrafos vizinhos de contexto.
    """

    category: Category
    excerpts: Tuple[str, ...] = field(default_factory=tuple)
    source: Optional[UnitKind] = None

    @property
    def header(self) -> str:
        from .formatter import header_for
        return header_for(self.category)

    @property
    def is_empty(self) -> bool:
        return len(self.excerpts) == 0

    def to_text(self) -> str:
        """Bloco formatado; vazio quando não há trechos."""
        from .formatter import format_block
        return format_block(self.category, self.excerpts)


# =============================================================================
# Modelos da API
# =============================================================================

class ExtractionRequest(BaseModel):
    """Request para extração de trechos a partir de texto colado."""

    texto: str = Field(
        default="",
        description="Texto integral da peça (já convertido de PDF/DOCX/TXT)"
    )

    categorias: List[str] = Field(
        default_factory=lambda: [Category.INSALUBRIDADE.value],
        description="Tipos a extrair: insalubridade, periculosidade, acidentario"
    )

    perfil: ExtractionProfile = Field(
        default=ExtractionProfile.INICIAL,
        description="Tabela de palavras-chave a usar"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "texto": "O reclamante laborava exposto a ruído acima do limite de tolerância...",
                "categorias": ["insalubridade", "periculosidade"],
                "perfil": "inicial"
            }
        }
    )


class ExtractionResponse(BaseModel):
    """Response da extração de trechos."""

    texto: str = Field(..., description="Bloco formatado com os trechos (vazio se nada encontrado)")
    encontrado: bool = Field(..., description="Se algum trecho relevante foi encontrado")
    categorias_encontradas: List[Category] = Field(
        default_factory=list,
        description="Categorias que produziram trechos, na ordem solicitada"
    )
    fonte: Optional[str] = Field(default=None, description="Formato do arquivo de origem")
    paginas: Optional[int] = Field(default=None, description="Páginas processadas (PDF)")


class CategoryInfo(BaseModel):
    """Descrição de uma categoria e suas palavras-chave."""

    categoria: Category
    nome: str
    palavras_chave: List[str]
    exclusoes: List[str]
