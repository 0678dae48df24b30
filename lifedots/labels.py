"""
Label sets
Pre-localized strings handed to the engine; no locale lookup happens here
"""

from .models import Labels

ENGLISH = Labels(
    month_names=(
        "JANUARY", "FEBRUARY", "MARCH", "APRIL", "MAY", "JUNE",
        "JULY", "AUGUST", "SEPTEMBER", "OCTOBER", "NOVEMBER", "DECEMBER",
    ),
    month_abbreviations=(
        "JAN", "FEB", "MAR", "APR", "MAY", "JUN",
        "JUL", "AUG", "SEP", "OCT", "NOV", "DEC",
    ),
)

RUSSIAN = Labels(
    month_names=(
        "ЯНВАРЬ", "ФЕВРАЛЬ", "МАРТ", "АПРЕЛЬ", "МАЙ", "ИЮНЬ",
        "ИЮЛЬ", "АВГУСТ", "СЕНТЯБРЬ", "ОКТЯБРЬ", "НОЯБРЬ", "ДЕКАБРЬ",
    ),
    month_abbreviations=(
        "ЯНВ.", "ФЕВР.", "МАР.", "АПР.", "МАЯ", "ИЮН.",
        "ИЮЛ.", "АВГ.", "СЕНТ.", "ОКТ.", "НОЯБ.", "ДЕК.",
    ),
    year_title="{year} ГОД",
    life_title="КАЛЕНДАРЬ ЖИЗНИ",
    month_progress=" ПРОЖИТО  •  ",
    month_remaining=" ДНЕЙ ОСТАЛОСЬ",
    year_progress=" ГОДА ПРОШЛО  •  ",
    year_remaining=" ДНЕЙ ОСТАЛОСЬ",
    life_progress=" ЖИЗНИ  •  ",
    life_remaining=" НЕДЕЛЬ ОСТАЛОСЬ",
)

LABEL_SETS = {
    'en': ENGLISH,
    'ru': RUSSIAN,
}


def get_labels(locale: str) -> Labels:
    """Label set for a locale code, English when unknown"""
    return LABEL_SETS.get(locale, ENGLISH)
