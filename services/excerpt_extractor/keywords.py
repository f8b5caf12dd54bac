# services/excerpt_extractor/keywords.py
"""
Tabelas de palavras-chave por categoria e perfil de extração.

As tabelas são dados estáticos e imutáveis. Podem ser substituídas por um
arquivo JSON apontado por EXCERPT_KEYWORDS_FILE, no formato:

    {
        "inicial": {
            "obrigatorias": {"insalubridade": ["ruído", "nr-15"]},
            "exclusoes": ["valor da causa"]
        }
    }

Perfis ou categorias ausentes no arquivo mantêm os valores padrão.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from .models import Category, ExtractionProfile


logger = logging.getLogger(__name__)


class KeywordConfigError(Exception):
    """Arquivo de palavras-chave inválido ou ilegível."""


@dataclass(frozen=True)
class KeywordTable:
    """Palavras obrigatórias por categoria e exclusões globais."""

    required: Mapping[Category, Tuple[str, ...]]
    exclusions: Tuple[str, ...] = ()

    def for_category(self, category: Category) -> Tuple[str, ...]:
        return self.required.get(category, ())


def _table(required: Dict[Category, List[str]], exclusions: List[str]) -> KeywordTable:
    return KeywordTable(
        required=MappingProxyType({
            category: tuple(_clean(words)) for category, words in required.items()
        }),
        exclusions=tuple(_clean(exclusions)),
    )


def _clean(words: List[str]) -> List[str]:
    result = []
    for word in words:
        word = word.lower()
        if word.strip() and word not in result:
            result.append(word)
    return result


# =============================================================================
# Perfil "inicial" (petição inicial)
# =============================================================================

# Termos processuais que não interessam ao perito.
# "r$ " mantém o espaço para não casar com siglas coladas.
EXCLUSOES_GLOBAIS = [
    "valor da causa", "valor atribuído", "procedente deferindo",
    "r$ ", "reais", "sentença", "processo", "juiz", "tribunal",
    "recurso", "apelação", "embargos", "decisão judicial",
    "código civil", "clt", "artigo", "parágrafo", "inciso",
    "documento assinado", "número do documento", "instância",
]

INICIAL = _table(
    {
        Category.INSALUBRIDADE: [
            "insalubridade",
            "insalubre",
            "nr-15",
            "nr15",
            "adicional de insalubridade",
            "agente químico",
            "agente físico",
            "agente fisico",
            "agente biológico",
            "limite de tolerância",
            "ruído",
            "calor",
            "poeira",
            "solvente",
            "benzeno",
            "ambiente insalubre",
            "exposição ocupacional",
        ],
        Category.PERICULOSIDADE: [
            "periculosidade",
            "periculoso",
            "nr-16",
            "nr16",
            "adicional de periculosidade",
            "inflamável",
            "explosivo",
            "energia elétrica",
            "eletricidade",
            "líquidos inflamáveis",
            "gases inflamáveis",
            "atividade perigosa",
            "risco de explosão",
            "exposição periculosa",
        ],
        Category.ACIDENTARIO: [
            "acidentário",
            "acidentario",
            "acidentária",
            "acidente de trabalho",
            "cat",
            "comunicação de acidente",
            "benefício acidentário",
            "auxílio-doença",
            "auxilio-doenca",
            "ntep",
            "doença ocupacional",
            "doença do trabalho",
            "nexo causal",
            "incapacidade laboral",
            "inss",
        ],
    },
    EXCLUSOES_GLOBAIS,
)


# =============================================================================
# Perfil "defesa" (contestação)
# =============================================================================

DEFESA = _table(
    {
        Category.INSALUBRIDADE: [
            "insalubridade",
            "insalubre",
            "nr-15",
            "nr15",
            "adicional de insalubridade",
            "anexo",
            "agente químico",
            "agente fisico",
            "agente físico",
            "agente biológico",
            "limite de tolerância",
            "lt",
            "ruído",
            "calor",
            "poeira",
            "solvente",
            "benzeno",
            "epi",
            "epc",
        ],
        Category.PERICULOSIDADE: [
            "periculosidade",
            "periculoso",
            "nr-16",
            "nr16",
            "adicional de periculosidade",
            "inflamável",
            "explosivo",
            "energia elétrica",
            "eletricidade",
            "líquidos inflamáveis",
            "gases inflamáveis",
            "armazenamento",
            "manuseio",
            "perigo",
            "exposição periculosa",
        ],
        Category.ACIDENTARIO: [
            "acidentário",
            "acidentario",
            "acidentária",
            "acidente de trabalho",
            "cat",
            "comunicação de acidente",
            "benefício acidentário",
            "auxílio-doença",
            "auxilio-doenca",
            "ntep",
            "doença ocupacional",
            "doença do trabalho",
            "nexo causal",
            "lesão",
            "sinistro",
            "incapacidade",
        ],
    },
    [],
)

DEFAULT_TABLES: Mapping[ExtractionProfile, KeywordTable] = MappingProxyType({
    ExtractionProfile.INICIAL: INICIAL,
    ExtractionProfile.DEFESA: DEFESA,
})


# =============================================================================
# Configuração externa
# =============================================================================

class KeywordProfileConfig(BaseModel):
    """Sobrescrita de um perfil vinda do arquivo JSON."""

    obrigatorias: Dict[Category, List[str]] = Field(default_factory=dict)
    exclusoes: Optional[List[str]] = None

    @field_validator("obrigatorias")
    @classmethod
    def _valida_obrigatorias(cls, value: Dict[Category, List[str]]):
        for category, words in value.items():
            if not _clean(words):
                raise ValueError(f"Lista de palavras-chave vazia para {category.value}")
            if any(not w.strip() for w in words):
                raise ValueError(f"Palavra-chave vazia em {category.value}")
        return value

    @field_validator("exclusoes")
    @classmethod
    def _valida_exclusoes(cls, value: Optional[List[str]]):
        if value is not None and any(not w.strip() for w in value):
            raise ValueError("Palavra de exclusão vazia")
        return value


class KeywordTableConfig(BaseModel):
    """Conteúdo do arquivo EXCERPT_KEYWORDS_FILE."""

    inicial: Optional[KeywordProfileConfig] = None
    defesa: Optional[KeywordProfileConfig] = None


def _merge(base: KeywordTable, override: KeywordProfileConfig) -> KeywordTable:
    required = {category: list(words) for category, words in base.required.items()}
    required.update(override.obrigatorias)
    exclusions = override.exclusoes if override.exclusoes is not None else list(base.exclusions)
    return _table(required, exclusions)


def load_keyword_tables(
    path: Optional[Union[str, Path]] = None
) -> Mapping[ExtractionProfile, KeywordTable]:
    """
    Carrega as tabelas de palavras-chave.

    Args:
        path: Arquivo JSON com sobrescritas (usa apenas padrões se None)

    Returns:
        Mapeamento perfil -> KeywordTable

    Raises:
        KeywordConfigError: se o arquivo não existe ou é inválido
    """
    if not path:
        return DEFAULT_TABLES

    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        config = KeywordTableConfig.model_validate(raw)
    except (OSError, json.JSONDecodeError) as e:
        raise KeywordConfigError(f"Não foi possível ler {path}: {e}") from e
    except ValidationError as e:
        raise KeywordConfigError(f"Arquivo de palavras-chave inválido ({path}): {e}") from e

    tables = dict(DEFAULT_TABLES)
    for profile in ExtractionProfile:
        override = getattr(config, profile.value)
        if override is not None:
            tables[profile] = _merge(DEFAULT_TABLES[profile], override)

    logger.info(f"Palavras-chave carregadas de {path}")
    return MappingProxyType(tables)
