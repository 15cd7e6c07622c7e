"""Crawler advice tokens placed inside the ``robots`` meta tag.

Explicit advice is stated by the caller. Implicit advice (``index`` and
``follow``) is assumed by crawlers unless a cancelling advice is present,
and :func:`implicit_advices_and` derives it from the explicit advice.
Advice values are compared by label only when resolving implicit advice,
so caller-defined :class:`CustomAdvice` values interoperate with the
enumerations.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Protocol, Tuple


class Advice(Protocol):
    """Anything carrying a robots directive label."""

    @property
    def label(self) -> str: ...


class CommonAdvice(Enum):
    """Explicit advice understood by the major crawlers."""

    NO_INDEX = "noindex"
    NO_FOLLOW = "nofollow"
    NONE = "none"
    NO_ARCHIVE = "noarchive"
    NO_SNIPPET = "nosnippet"
    DONT_USE_DESCRIPTION_FROM_OPEN_DIRECTORY_PROJECT = "noodp"
    NO_IMAGE_INDEX = "noimageindex"

    @property
    def label(self) -> str:
        return self.value


class ImplicitAdvice(Enum):
    """Advice that applies unless one of its cancelling advices is present."""

    INDEX = ("index", (CommonAdvice.NO_INDEX.label, CommonAdvice.NONE.label))
    FOLLOW = ("follow", (CommonAdvice.NO_FOLLOW.label, CommonAdvice.NONE.label))

    def __init__(self, label: str, cancelling_labels: Tuple[str, ...]) -> None:
        self._label = label
        self.cancelling_labels = frozenset(cancelling_labels)

    @property
    def label(self) -> str:
        return self._label


@dataclass(frozen=True)
class CustomAdvice:
    """Advice with a caller-defined label."""

    label: str


def advice_for_label(label: str) -> Advice:
    """Return the known advice for ``label`` or a :class:`CustomAdvice`."""

    for advice in (*CommonAdvice, *ImplicitAdvice):
        if advice.label == label:
            return advice
    return CustomAdvice(label)


def implicit_advices_and(advices: Iterable[Advice]) -> List[Advice]:
    """Return ``advices`` followed by every implicit advice that still applies.

    Implicit advice is appended in declaration order. An implicit advice is
    skipped when an advice with its own label or one of its cancelling
    labels is already present, counting implicit advice appended earlier in
    the same call. Running the result through again adds nothing.
    """

    result: List[Advice] = list(advices)
    for implicit in ImplicitAdvice:
        if _can_add(implicit, result):
            result.append(implicit)
    return result


def _can_add(implicit: ImplicitAdvice, advices: Iterable[Advice]) -> bool:
    for advice in advices:
        if advice.label == implicit.label or advice.label in implicit.cancelling_labels:
            return False
    return True
