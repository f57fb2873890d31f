"""Конфигурация конверсии DD → DM/DMS."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ConversionOptions:
    """Конфигурация конверсии.

    decimals — точность дробной единицы (минуты для DM, секунды для DMS).
    None означает точность по умолчанию для целевого формата.

    clamp — ограничить градусы диапазоном оси перед конверсией
    вместо того, чтобы оставить их без проверки.
    """

    decimals: int | None = None
    clamp: bool = False

    def __post_init__(self) -> None:
        if self.decimals is not None and self.decimals < 0:
            raise ValueError(f"decimals must be non-negative, got {self.decimals}")

    def resolve_decimals(self, default: int) -> int:
        """Точность с учётом значения по умолчанию целевого формата."""
        return default if self.decimals is None else self.decimals
