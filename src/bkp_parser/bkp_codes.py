"""
Canonical BKP codes (Swiss construction cost classification) for the heating trade.

The parser keeps section labels exactly as printed in the document; this
table is only used to report which codes are canonical and which workbook
sheet a section belongs to.
"""

from typing import Optional

BKP_CODES = {
    # 24: Heizungs-, Lüftungs-, Klimaanlagen
    "24": "Heizungs-, Lüftungs-, Klimaanlagen",

    "240": "Übergangsposition",
    "240.1": "Übergangsposition",

    "241": "Energiezulieferung, Lagerung",
    "241.1": "Zulieferung, Energieträger, Lagerung",
    "241.2": "Soleleitungen im Gebäude",
    "241.5": "Apparate und Armaturen",
    "241.6": "Transport und Montage",
    "241.9": "Dämmung Leitungen",
    "241.10": "Dämmung Sondenverteiler",

    "242": "Wärmeerzeugung",
    "242.0": "Sole/Wasser-Wärmepumpe Heizen / Kühlen",
    "242.1": "Wärmeerzeugung",
    "242.2": "Armaturen",
    "242.3": "Heizungsleitungen im Technikraum",
    "242.4": "Apparate und Armaturen",
    "242.5": "Transport und Montage",
    "242.6": "Dämmungen Leitungen",
    "242.7": "Demontagearbeiten Heizung",
    "242.8": "Thermostatventile Heizkörper",
    "242.9": "Wasseranschluss Wassererwärmer",

    "243": "Wärmeverteilung",
    "243.1": "Bodenheizung",
    "243.2": "Leitungen",
    "243.4": "Transport und Montage",
    "243.5": "Dämmung Leitungen",
    "243.6": "Brandschutzdämmung Deckendurchführung",
    "243.7": "Stellantriebe",

    "244": "Lüftungsanlagen",
    "244.1": "Wärme- und Wasserzähler",

    "245": "Klimaanlagen",
    "245.1": "Bodendämmung",

    "246": "Füllung mit demineralisiertem Wasser",
    "247": "Heizprovisorium, Bauaustrockung",
    "250": "Revisionsunterlagen",
}

BKP_SHEET_MAPPING = {
    "240": "BKP 240 Übergangsposition",
    "241": "BKP 241 Energiegewinnung",
    "242": "BKP 242 Wärmeerzeugung",
    "243": "BKP 243 Wärmeverteilung",
}


def validate_bkp_code(code: str) -> bool:
    return code in BKP_CODES


def get_canonical_label(code: str) -> Optional[str]:
    return BKP_CODES.get(code)


def get_bkp_main_category(code: str) -> str:
    """Main category of a code, e.g. "241" for "241.2"."""
    return code.split('.')[0]


def get_bkp_sheet_name(code: str) -> Optional[str]:
    return BKP_SHEET_MAPPING.get(get_bkp_main_category(code))
