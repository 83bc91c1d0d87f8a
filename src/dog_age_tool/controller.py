"""Orquestación: fecha -> edades -> storage -> mensaje."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, tzinfo
from typing import Protocol

from dateutil import tz

from dog_age_tool.age import (
    InvalidDateError,
    elapsed_years,
    human_age_from_dog_age,
    parse_birthday,
)
from dog_age_tool.formatting import DEFAULT_SUBJECT, render_result, round_one_decimal
from dog_age_tool.model import AgeResult
from dog_age_tool.storage import PetAgeStore

logger = logging.getLogger(__name__)


class DateInput(Protocol):
    """Anything holding the selected birthday text (a date field)."""

    def get_value(self) -> str | None: ...

    def set_value(self, value: str) -> None: ...


class AgeController:
    """Runs the compute cycle for both triggers (button and startup restore).

    Collaborators are injected so the flow can run without a GUI.
    """

    def __init__(
        self,
        date_input: DateInput,
        render: Callable[[str], None],
        store: PetAgeStore,
        *,
        clock: Callable[[], datetime] | None = None,
        subject: str = DEFAULT_SUBJECT,
        tzinfo: tzinfo | None = None,
    ) -> None:
        self._date_input = date_input
        self._render = render
        self._store = store
        self._tzinfo = tzinfo if tzinfo is not None else tz.tzlocal()
        self._clock = clock or (lambda: datetime.now(tz=self._tzinfo))
        self._subject = subject

    def _clear(self) -> None:
        self._render("")

    def _show(self, dog_age: float | None, human_age: float | None) -> None:
        self._render(render_result(dog_age, human_age, self._subject))

    def on_calculate(self) -> AgeResult | None:
        """User trigger: persist the raw date first, then compute."""
        birthday = self._date_input.get_value() or None
        if not birthday:
            self._clear()
            return None
        # Result ignored: a failed write must not block the calculation.
        self._store.save(birthday)
        return self.compute_and_save(birthday)

    def on_ready(self) -> AgeResult | None:
        """Startup trigger: restore, show cached ages, then recompute."""
        record = self._store.get_all()
        if not record.birthday:
            self._clear()
            return None
        self._date_input.set_value(record.birthday)
        if record.has_ages:
            self._show(record.dog_age, record.human_age)
        return self.compute_and_save(record.birthday)

    def compute_and_save(self, birthday: str | None) -> AgeResult | None:
        """Compute both ages for ``birthday``, store them and render.

        Args:
            birthday: ISO ``YYYY-MM-DD`` date string.

        Returns:
            The rounded result, or None when there is nothing to show.
        """
        if not birthday:
            self._clear()
            return None
        try:
            born = parse_birthday(birthday)
        except InvalidDateError as exc:
            logger.debug("Calculo abortado: %s", exc)
            self._clear()
            return None

        raw_dog_age = elapsed_years(born, self._clock(), self._tzinfo)
        dog_age = round_one_decimal(raw_dog_age)
        human_age = round_one_decimal(human_age_from_dog_age(raw_dog_age))

        self._store.save(birthday, dog_age=dog_age, human_age=human_age)
        self._show(dog_age, human_age)
        return AgeResult(birthday=birthday, dog_age=dog_age, human_age=human_age)
