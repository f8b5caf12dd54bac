# tests/excerpt_extractor/test_segmenter.py
"""
Testes da segmentação em parágrafos e frases.

Execução:
    pytest tests/excerpt_extractor/ -v
"""

from services.excerpt_extractor.models import UnitKind
from services.excerpt_extractor.segmenter import (
    segment,
    split_paragraphs,
    split_sentences,
)


class TestParagraphs:
    """Divisão em parágrafos por linha em branco."""

    def test_split_on_blank_line(self):
        text = "Primeiro parágrafo com texto suficiente.\n\nSegundo parágrafo também com texto."
        units = split_paragraphs(text)
        assert [u.content for u in units] == [
            "Primeiro parágrafo com texto suficiente.",
            "Segundo parágrafo também com texto.",
        ]
        assert all(u.kind == UnitKind.PARAGRAPH for u in units)

    def test_blank_line_with_spaces_is_separator(self):
        text = "Primeiro parágrafo com texto suficiente.\n   \t \nSegundo parágrafo também com texto."
        assert len(split_paragraphs(text)) == 2

    def test_windows_line_endings(self):
        text = "Primeiro parágrafo com texto suficiente.\r\n\r\nSegundo parágrafo também com texto."
        assert len(split_paragraphs(text)) == 2

    def test_collapses_internal_whitespace(self):
        text = "Linha   um\tcom\nquebra simples no meio do parágrafo."
        units = split_paragraphs(text)
        assert units[0].content == "Linha um com quebra simples no meio do parágrafo."

    def test_drops_short_paragraphs(self):
        """Parágrafos com até 20 caracteres são descartados."""
        text = "I - DOS FATOS\n\nO reclamante trabalhou na empresa por dez anos."
        units = split_paragraphs(text)
        assert len(units) == 1
        assert units[0].content.startswith("O reclamante")

    def test_exactly_twenty_chars_dropped(self):
        text = "a" * 20 + "\n\n" + "b" * 21
        units = split_paragraphs(text)
        assert [u.content for u in units] == ["b" * 21]

    def test_keeps_original_index(self):
        text = "Curto\n\nParágrafo longo o bastante para ficar.\n\nOutro parágrafo longo o bastante."
        units = split_paragraphs(text)
        assert [u.index for u in units] == [1, 2]


class TestSentences:
    """Divisão em frases (fallback)."""

    def test_split_on_terminal_punctuation(self):
        text = (
            "Primeira frase bastante longa para passar o filtro. Curta! "
            "Terceira frase também bastante longa para o filtro?"
        )
        units = split_sentences(text)
        assert [u.content for u in units] == [
            "Primeira frase bastante longa para passar o filtro.",
            "Terceira frase também bastante longa para o filtro?",
        ]
        assert all(u.kind == UnitKind.SENTENCE for u in units)

    def test_punctuation_without_space_does_not_split(self):
        text = "O valor de R$ 5.000,00 foi pago ao empregado no mês seguinte."
        units = split_sentences(text)
        assert len(units) == 1

    def test_sentences_cross_paragraphs(self):
        """As frases são extraídas do texto inteiro, com espaços colapsados."""
        text = "Frase que termina no primeiro parágrafo.\n\nFrase que começa no segundo parágrafo."
        units = split_sentences(text)
        assert [u.content for u in units] == [
            "Frase que termina no primeiro parágrafo.",
            "Frase que começa no segundo parágrafo.",
        ]


class TestSegment:
    """Segmentação completa."""

    def test_empty_text(self):
        result = segment("")
        assert result.paragraphs == ()
        assert result.sentences == ()
        assert result.is_empty

    def test_whitespace_only(self):
        assert segment("   \n\n \t ").is_empty

    def test_returns_both_partitions(self):
        text = "Parágrafo único com uma frase longa o bastante para o filtro."
        result = segment(text)
        assert len(result.paragraphs) == 1
        assert len(result.sentences) == 1
