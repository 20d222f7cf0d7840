"""
Formats de date/heure partagés par les schémas.
Les dates sont échangées au format JJ.MM.AAAA, les heures au format HH:MM.
"""

from datetime import date, datetime, time
from typing import Optional

DAY_FORMAT = "%d.%m.%Y"
CLOCK_FORMAT = "%H:%M"


def parse_day(value) -> date:
    """Convertit 'JJ.MM.AAAA' en date. Les objets date sont acceptés tels quels."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError("Date invalide, format attendu : JJ.MM.AAAA.")
    try:
        return datetime.strptime(value.strip(), DAY_FORMAT).date()
    except ValueError:
        raise ValueError(f"Date invalide '{value}', format attendu : JJ.MM.AAAA.")


def format_day(value: Optional[date]) -> Optional[str]:
    return value.strftime(DAY_FORMAT) if value is not None else None


def parse_clock(value) -> time:
    """Convertit 'HH:MM' en heure. Les objets time sont acceptés tels quels."""
    if isinstance(value, time):
        return value
    if not isinstance(value, str):
        raise ValueError("Heure invalide, format attendu : HH:MM.")
    try:
        return datetime.strptime(value.strip(), CLOCK_FORMAT).time()
    except ValueError:
        raise ValueError(f"Heure invalide '{value}', format attendu : HH:MM.")


def format_clock(value: Optional[time]) -> Optional[str]:
    return value.strftime(CLOCK_FORMAT) if value is not None else None


def normalize_label(value: Optional[str]) -> Optional[str]:
    """Supprime les espaces superflus ; refuse une chaîne vide."""
    if value is None:
        return value
    if not value.strip():
        raise ValueError("Le champ ne peut pas être vide.")
    return value.strip()


def reject_null(value):
    """Un champ obligatoire peut être omis d'une mise à jour partielle, mais pas mis à null."""
    if value is None:
        raise ValueError("Ce champ ne peut pas être null.")
    return value
