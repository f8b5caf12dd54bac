# services/excerpt_extractor/extractor.py
"""
Pipeline de extração de trechos por tipo de adicional.

Texto bruto -> segmentação -> (por categoria) classificação -> ranqueamento
-> formatação. Cada chamada é independente e determinística; o extrator não
guarda estado entre requisições.
"""

import time
import logging
from typing import Iterable, List, Mapping, Optional, Union

from .classifier import filter_relevant
from .formatter import join_blocks
from .keywords import KeywordTable, load_keyword_tables
from .models import (
    Category,
    ClassificationResult,
    ExtractionProfile,
    Segmentation,
    UnitKind,
)
from .ranker import expand_context, rank_excerpts
from .segmenter import segment


logger = logging.getLogger(__name__)

CategoryLike = Union[Category, str]


def normalize_categories(categories: Iterable[CategoryLike]) -> List[Category]:
    """
    Converte e deduplica as categorias, preservando a ordem solicitada.

    Raises:
        ValueError: se alguma categoria é desconhecida
    """
    if isinstance(categories, str):
        categories = [categories]

    result: List[Category] = []
    for item in categories or ():
        category = item if isinstance(item, Category) else Category.parse(item)
        if category not in result:
            result.append(category)
    return result


class ExcerptExtractor:
    """
    Extrator de trechos relevantes de peças processuais.

    Exemplo de uso:
        from services.excerpt_extractor import excerpt_extractor

        bloco = excerpt_extractor.extract(texto, ["insalubridade", "periculosidade"])
        if not bloco:
            ...  # nenhum trecho relevante
    """

    def __init__(
        self,
        tables: Optional[Mapping[ExtractionProfile, KeywordTable]] = None,
        keywords_file: Optional[str] = None
    ):
        """
        Args:
            tables: Tabelas de palavras-chave já carregadas
            keywords_file: Arquivo JSON de sobrescrita (carregado sob demanda)
        """
        self._tables = tables
        self._keywords_file = keywords_file

    @property
    def tables(self) -> Mapping[ExtractionProfile, KeywordTable]:
        """Lazy load das tabelas de palavras-chave"""
        if self._tables is None:
            self._tables = load_keyword_tables(self._keywords_file)
        return self._tables

    def table_for(self, profile: ExtractionProfile = ExtractionProfile.INICIAL) -> KeywordTable:
        return self.tables[ExtractionProfile(profile)]

    def classify(
        self,
        text: str,
        category: CategoryLike,
        profile: ExtractionProfile = ExtractionProfile.INICIAL,
        segmentation: Optional[Segmentation] = None,
        with_context: Optional[bool] = None
    ) -> ClassificationResult:
        """
        Seleciona os trechos de uma categoria.

        Parágrafos têm preferência; se nenhum parágrafo for relevante,
        usa as frases.
        No perfil "defesa" os trechos de parágrafo recebem os vizinhos curtos
        sem palavra-chave (ver expand_context).

        Args:
            text: Texto bruto da peça
            category: Categoria a extrair
            profile: Perfil de palavras-chave
            segmentation: Segmentação já calculada (evita refazer por categoria)
            with_context: Anexa vizinhos de contexto (padrão: só no perfil "defesa")

        Returns:
            ClassificationResult (vazio se nada relevante)
        """
        category = category if isinstance(category, Category) else Category.parse(category)
        if segmentation is None:
            segmentation = segment(text)

        table = self.table_for(profile)
        required = table.for_category(category)

        source = UnitKind.PARAGRAPH
        candidates = filter_relevant(segmentation.paragraphs, required, table.exclusions)
        if not candidates:
            source = UnitKind.SENTENCE
            candidates = filter_relevant(segmentation.sentences, required, table.exclusions)

        excerpts = rank_excerpts(candidates, required)
        if not excerpts:
            return ClassificationResult(category=category)

        if with_context is None:
            with_context = ExtractionProfile(profile) == ExtractionProfile.DEFESA
        if with_context and source == UnitKind.PARAGRAPH:
            excerpts = expand_context(
                excerpts, segmentation.paragraphs, segmentation.blocks, required
            )

        return ClassificationResult(category=category, excerpts=tuple(excerpts), source=source)

    def classify_all(
        self,
        text: str,
        categories: Iterable[CategoryLike],
        profile: ExtractionProfile = ExtractionProfile.INICIAL
    ) -> List[ClassificationResult]:
        """Classifica o texto para cada categoria, na ordem solicitada."""
        wanted = normalize_categories(categories)
        if not wanted or not text or not text.strip():
            return [ClassificationResult(category=c) for c in wanted]

        segmentation = segment(text)
        return [
            self.classify(text, category, profile, segmentation=segmentation)
            for category in wanted
        ]

    def extract(
        self,
        text: str,
        categories: Iterable[CategoryLike],
        profile: ExtractionProfile = ExtractionProfile.INICIAL
    ) -> str:
        """
        Extrai os trechos e monta o bloco final.

        Returns:
            Blocos das categorias com resultado, separados por "---";
            string vazia se nada foi encontrado
        """
        start_time = time.perf_counter()

        results = self.classify_all(text, categories, profile)
        output = join_blocks(result.to_text() for result in results)

        # Log métricas (sem conteúdo)
        logger.debug(
            f"Extração de trechos: {len(text or '')} chars, "
            f"{sum(len(r.excerpts) for r in results)} trechos em "
            f"{(time.perf_counter() - start_time) * 1000:.2f}ms"
        )
        return output


def _default_extractor() -> ExcerptExtractor:
    from config import EXCERPT_KEYWORDS_FILE
    return ExcerptExtractor(keywords_file=EXCERPT_KEYWORDS_FILE)


# Singleton
excerpt_extractor = _default_extractor()


def extract_by_types(
    text: str,
    categories: Iterable[CategoryLike],
    profile: ExtractionProfile = ExtractionProfile.INICIAL
) -> str:
    """Atalho para excerpt_extractor.extract()."""
    return excerpt_extractor.extract(text, categories, profile)
