"""Linguistics pack: transcription symbols and the ``transc`` function."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .transc import TranscArgs, TranscFunction, TranscriptionError, TranscriptionType

if TYPE_CHECKING:
    from lingssg.core.ssg import LinSsg

logger = logging.getLogger(__name__)

ALIASES = {
    "GraRaw": TranscriptionType.GraphemicRaw.value,
    "Morpho": TranscriptionType.Morphophonemic.value,
}


def install(ssg: "LinSsg") -> None:
    for ty in (
        TranscriptionType.Phonemic,
        TranscriptionType.Phonetic,
        TranscriptionType.Graphemic,
        TranscriptionType.GraphemicRaw,
        TranscriptionType.Morphophonemic,
    ):
        ssg.register_symbol(ty.value)
    for name, value in ALIASES.items():
        ssg.register_const(name, value)
    ssg.register_function("transc", TranscFunction())
    logger.debug("Installed linguistics pack")


__all__ = [
    "install",
    "TranscFunction",
    "TranscArgs",
    "TranscriptionError",
    "TranscriptionType",
]
