"""Tabla de equivalencias edad de perro -> edad humana."""

from __future__ import annotations

import pandas as pd

from dog_age_tool.age import human_age_from_dog_age
from dog_age_tool.formatting import round_one_decimal


def age_chart(max_years: float = 20.0, step: float = 0.5) -> pd.DataFrame:
    """Build a conversion table from ``step`` up to ``max_years`` dog years.

    Args:
        max_years: Last dog age included (inclusive when it falls on a step).
        step: Increment between rows (at least 0.1, the display precision).

    Returns:
        DataFrame with ``dog_age`` and ``human_age`` columns, one decimal each.

    Raises:
        ValueError: If ``step`` is below 0.1 or ``max_years`` is not positive.
    """
    if step < 0.1:
        raise ValueError("step debe ser al menos 0.1")
    if max_years <= 0:
        raise ValueError("max_years debe ser positivo")

    count = int(max_years / step + 1e-9)
    dog_ages = [step * i for i in range(1, count + 1)]
    return pd.DataFrame(
        {
            "dog_age": [round_one_decimal(age) for age in dog_ages],
            "human_age": [
                round_one_decimal(human_age_from_dog_age(age)) for age in dog_ages
            ],
        }
    )
