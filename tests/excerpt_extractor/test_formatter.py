# tests/excerpt_extractor/test_formatter.py
"""
Testes da montagem do bloco de trechos.
"""

from services.excerpt_extractor.formatter import format_block, header_for, join_blocks
from services.excerpt_extractor.models import Category, ClassificationResult


class TestFormatBlock:

    def test_header_and_excerpts(self):
        result = format_block(Category.INSALUBRIDADE, ["Trecho um.", "Trecho dois."])
        assert result == (
            "Trechos extraídos (tipo: insalubridade)\n\n"
            "Trecho um.\n\n"
            "Trecho dois."
        )

    def test_empty_excerpts(self):
        assert format_block(Category.PERICULOSIDADE, []) == ""

    def test_header_uses_category_value(self):
        assert header_for(Category.ACIDENTARIO) == "Trechos extraídos (tipo: acidentario)"

    def test_classification_result_to_text(self):
        result = ClassificationResult(category=Category.PERICULOSIDADE, excerpts=("Trecho.",))
        assert result.header == "Trechos extraídos (tipo: periculosidade)"
        assert result.to_text() == "Trechos extraídos (tipo: periculosidade)\n\nTrecho."
        assert ClassificationResult(category=Category.PERICULOSIDADE).to_text() == ""


class TestJoinBlocks:

    def test_separator_between_blocks(self):
        assert join_blocks(["A", "B"]) == "A\n\n---\n\nB"

    def test_skips_empty_blocks(self):
        assert join_blocks(["", "A", "  ", "B", ""]) == "A\n\n---\n\nB"

    def test_all_empty(self):
        assert join_blocks(["", ""]) == ""
        assert join_blocks([]) == ""
