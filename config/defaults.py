from config.schema import DateMode, LessonCardConfig


def default_config() -> LessonCardConfig:
    """Standard-Konfiguration: Kalendertage, strenge Prüfung verlegter Stunden."""
    return LessonCardConfig(
        date_mode=DateMode.DATE,
        strict_replacement=True,
    )
