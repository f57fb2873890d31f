"""
Constants — Константы точности, пределов и коэффициентов конверсии

Единственный источник числовых констант для parser/converter/formatter.
"""

from typing import Final


# =============================================================================
# ТОЧНОСТЬ ПО УМОЛЧАНИЮ (знаков после запятой)
# =============================================================================

# DD: точность градусов при форматировании
DEFAULT_DD_DECIMALS: Final[int] = 5

# DM: точность минут (конверсия и форматирование)
DEFAULT_DM_DECIMALS: Final[int] = 2

# DMS: точность секунд (конверсия и форматирование)
DEFAULT_DMS_DECIMALS: Final[int] = 2


# =============================================================================
# ПРЕДЕЛЫ
# =============================================================================

MAX_LATITUDE_DEG: Final[float] = 90.0
MAX_LONGITUDE_DEG: Final[float] = 180.0

# Верхние (исключающие) границы минут и секунд.
# Они же пороги переноса (rollover) при округлении.
MAX_MINUTES: Final[float] = 60.0
MAX_SECONDS: Final[float] = 60.0


# =============================================================================
# КОЭФФИЦИЕНТЫ КОНВЕРСИИ
# =============================================================================

MINUTES_PER_DEGREE: Final[int] = 60
SECONDS_PER_MINUTE: Final[int] = 60
SECONDS_PER_DEGREE: Final[int] = MINUTES_PER_DEGREE * SECONDS_PER_MINUTE
