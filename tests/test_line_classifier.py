#!/usr/bin/env python3
"""
Tests for the line classifier.
Covers each rule and the order in which rules are tried.
"""

import unittest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bkp_parser.line_classifier import (
    ArticleLine,
    GenericText,
    MultiArticle,
    SectionHeader,
    Skip,
    StandaloneDimension,
    StandaloneQuantity,
    TableHeader,
    TotalLine,
    Unmatched,
    classify_line,
)


class TestSkipRule(unittest.TestCase):
    """Noise lines are skipped before any other rule is tried."""

    def test_noise_lines(self):
        noise = [
            "Übertrag 12'345.00",
            "UEBERTRAG übertrag",
            "Projekt-Nr: H24-1215yk",
            "Seite: 3",
            "Datum: 12.03.2024",
            "Kostenzusammenstellung",
            "... Fortsetzung",
            "Heizung ..... 1200",
            "Artikel Text Menge ME",
            "Betrag (CHF)",
            "241 Heizung Seite: 2",
        ]
        for line in noise:
            with self.subTest(line=line):
                self.assertIsInstance(classify_line(line), Skip)

    def test_long_chf_line_not_skipped(self):
        line = "Preise in Schweizer Franken (CHF) exkl. MwSt"
        self.assertNotIsInstance(classify_line(line), Skip)


class TestSectionHeaderRule(unittest.TestCase):
    """Test cases for BKP header detection."""

    def test_headers(self):
        test_cases = [
            ("24 Heizung", "24", "Heizung"),
            ("241 Energiezulieferung, Lagerung", "241", "Energiezulieferung, Lagerung"),
            ("241.2 Soleleitungen im Gebäude", "241.2", "Soleleitungen im Gebäude"),
            ("242.0 Sole/Wasser-Wärmepumpe Heizen / Kühlen", "242.0", "Sole/Wasser-Wärmepumpe Heizen / Kühlen"),
            ("241.10 Dämmung Sondenverteiler", "241.10", "Dämmung Sondenverteiler"),
        ]
        for line, code, label in test_cases:
            with self.subTest(line=line):
                self.assertEqual(classify_line(line), SectionHeader(code=code, label=label))

    def test_description_constraints(self):
        """Digits only, too short, too long or letter-free descriptions are not headers."""
        for line in ["24", "24 X", "24 ab", "24 123", "241 " + "a" * 60]:
            with self.subTest(line=line):
                self.assertNotIsInstance(classify_line(line), SectionHeader)

    def test_umlaut_only_description(self):
        self.assertEqual(classify_line("25 Öäü"), SectionHeader(code="25", label="Öäü"))

    def test_quantity_with_word_unit_reads_as_header(self):
        """Header rule comes before the quantity rule."""
        self.assertEqual(classify_line("6 Stk"), SectionHeader(code="6", label="Stk"))

    def test_full_width_digits_not_codes(self):
        """Full-width digits are not read as numbers."""
        self.assertNotIsInstance(classify_line("２４１ Heizung"), SectionHeader)
        self.assertNotIsInstance(classify_line("８００１０.７０ Pumpe Set"), ArticleLine)
        self.assertNotIsInstance(classify_line("６ m"), StandaloneQuantity)


class TestTotalRule(unittest.TestCase):

    def test_total_kept_verbatim(self):
        line = "Total 241 Energiegewinnung"
        self.assertEqual(classify_line(line), TotalLine(text=line))

    def test_long_total_not_a_total(self):
        line = "Total " + "Energiezulieferung " * 5
        self.assertGreaterEqual(len(line.strip()), 80)
        self.assertNotIsInstance(classify_line(line.strip()), TotalLine)

    def test_total_needs_trailing_space(self):
        self.assertNotIsInstance(classify_line("Totalunternehmer"), TotalLine)


class TestTableHeaderRule(unittest.TestCase):

    def test_table_headers(self):
        for line in ["Artikel Text Menge ME Preis Betrag", "Menge ME Preis", "ARTIKEL BETRAG TEXT"]:
            with self.subTest(line=line):
                self.assertIsInstance(classify_line(line), TableHeader)


class TestArticleRules(unittest.TestCase):
    """Test cases for article lines and lines with several article numbers."""

    def test_article_line(self):
        self.assertEqual(
            classify_line("80010.70 Wärmepumpe Set"),
            ArticleLine(article_number="80010.70", description="Wärmepumpe Set"),
        )

    def test_line_starting_with_article_is_single_article(self):
        """The article rule wins even when more article numbers follow."""
        self.assertEqual(
            classify_line("80010.70 Pumpe A 80010.71 Pumpe B"),
            ArticleLine(article_number="80010.70", description="Pumpe A 80010.71 Pumpe B"),
        )

    def test_multi_article_line(self):
        intent = classify_line("Pos. 80010.70 Pumpe A 80010.71 Pumpe B")
        self.assertIsInstance(intent, MultiArticle)
        self.assertEqual(intent.articles, (("80010.70", "Pumpe A"), ("80010.71", "Pumpe B")))

    def test_multi_article_without_usable_descriptions(self):
        intent = classify_line("Pos. 80010.70 A 80010.71 B")
        self.assertEqual(intent, MultiArticle(articles=()))


class TestContinuationRules(unittest.TestCase):
    """Test cases for standalone quantity and dimension lines."""

    def test_quantities(self):
        test_cases = [
            ("15 m", "15", "m"),
            ("2.5 kg", "2.5", "kg"),
            ("10 %", "10", "%"),
            ("4 M", "4", "M"),
            ("3 ml ", "3", "ml"),
            ("6\u00a0m", "6", "m"),
        ]
        for line, quantity, unit in test_cases:
            with self.subTest(line=line):
                self.assertEqual(
                    classify_line(line.strip()),
                    StandaloneQuantity(quantity=quantity, unit=unit),
                )

    def test_dimensions(self):
        test_cases = [
            ("800x1900", "800x1900"),
            ("1200 x 600 mm", "1200 x 600 mm"),
            ("24", "24"),
            ("25 × 2,3", "25 × 2,3"),
        ]
        for line, text in test_cases:
            with self.subTest(line=line):
                self.assertEqual(classify_line(line), StandaloneDimension(text=text))


class TestFallbackRules(unittest.TestCase):

    def test_generic_text(self):
        self.assertEqual(
            classify_line("Inkl. Montage und Inbetriebnahme"),
            GenericText(text="Inkl. Montage und Inbetriebnahme"),
        )

    def test_generic_text_is_normalized(self):
        self.assertEqual(
            classify_line("Isolation   Armaturen ....,"),
            GenericText(text="Isolation Armaturen"),
        )

    def test_short_text_unmatched(self):
        self.assertIsInstance(classify_line("Kurz text"), Unmatched)
        self.assertIsInstance(classify_line("Anmerkung:"), Unmatched)


if __name__ == '__main__':
    unittest.main()
