# tests/excerpt_extractor/test_keywords.py
"""
Testes das tabelas de palavras-chave e do arquivo de sobrescrita.
"""

import json

import pytest

from services.excerpt_extractor.keywords import (
    DEFAULT_TABLES,
    DEFESA,
    INICIAL,
    KeywordConfigError,
    load_keyword_tables,
)
from services.excerpt_extractor.models import Category, ExtractionProfile


@pytest.fixture
def keywords_file(tmp_path):
    """Grava um JSON de palavras-chave e retorna o caminho."""
    def _write(content):
        path = tmp_path / "palavras_chave.json"
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content, ensure_ascii=False), encoding="utf-8")
        return path
    return _write


class TestDefaultTables:

    def test_all_categories_present(self):
        for table in (INICIAL, DEFESA):
            for category in Category:
                assert table.for_category(category)

    def test_keywords_are_lowercase(self):
        for table in DEFAULT_TABLES.values():
            for words in table.required.values():
                assert all(w == w.lower() for w in words)

    def test_global_exclusions_only_in_initial_profile(self):
        assert "valor da causa" in INICIAL.exclusions
        assert "clt" in INICIAL.exclusions
        assert "r$ " in INICIAL.exclusions
        assert DEFESA.exclusions == ()

    def test_tables_are_immutable(self):
        with pytest.raises(TypeError):
            INICIAL.required[Category.INSALUBRIDADE] = ("outra",)


class TestLoadKeywordTables:

    def test_no_file_returns_defaults(self):
        assert load_keyword_tables(None) is DEFAULT_TABLES

    def test_override_one_category(self, keywords_file):
        path = keywords_file({
            "inicial": {"obrigatorias": {"insalubridade": ["Esmeril", "RUÍDO"]}}
        })
        tables = load_keyword_tables(path)
        inicial = tables[ExtractionProfile.INICIAL]
        assert inicial.for_category(Category.INSALUBRIDADE) == ("esmeril", "ruído")
        assert inicial.for_category(Category.PERICULOSIDADE) == INICIAL.for_category(Category.PERICULOSIDADE)
        assert inicial.exclusions == INICIAL.exclusions
        assert tables[ExtractionProfile.DEFESA] is DEFESA

    def test_override_exclusions(self, keywords_file):
        path = keywords_file({"inicial": {"exclusoes": []}})
        tables = load_keyword_tables(str(path))
        assert tables[ExtractionProfile.INICIAL].exclusions == ()

    def test_missing_file(self, tmp_path):
        with pytest.raises(KeywordConfigError):
            load_keyword_tables(tmp_path / "nao_existe.json")

    def test_invalid_json(self, keywords_file):
        with pytest.raises(KeywordConfigError):
            load_keyword_tables(keywords_file("{ invalido"))

    def test_unknown_category(self, keywords_file):
        path = keywords_file({"inicial": {"obrigatorias": {"ergonomia": ["postura"]}}})
        with pytest.raises(KeywordConfigError):
            load_keyword_tables(path)

    def test_empty_keyword_rejected(self, keywords_file):
        path = keywords_file({"defesa": {"obrigatorias": {"periculosidade": ["perigo", "  "]}}})
        with pytest.raises(KeywordConfigError):
            load_keyword_tables(path)

    def test_empty_list_rejected(self, keywords_file):
        path = keywords_file({"defesa": {"obrigatorias": {"periculosidade": []}}})
        with pytest.raises(KeywordConfigError):
            load_keyword_tables(path)
