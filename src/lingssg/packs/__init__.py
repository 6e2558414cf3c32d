"""Installable packs of template symbols and functions.

A pack is a callable taking a :class:`~lingssg.core.ssg.LinSsg` and
registering whatever it provides. Active packs are listed in the
``packs.active`` configuration key.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Dict, Iterable

from lingssg.core.exceptions import UnknownPackError

from . import linguistics

if TYPE_CHECKING:
    from lingssg.core.ssg import LinSsg

logger = logging.getLogger(__name__)

PackInstaller = Callable[["LinSsg"], None]

PACKS: Dict[str, PackInstaller] = {
    "linguistics": linguistics.install,
}


def install_packs(ssg: "LinSsg", names: Iterable[str]) -> None:
    """Install the named packs in order.

    Raises:
        UnknownPackError: a name has no installer; nothing after it is installed
    """
    for name in names:
        installer = PACKS.get(name)
        if installer is None:
            raise UnknownPackError(name)
        logger.debug("Installing pack %s", name)
        installer(ssg)


__all__ = ["PACKS", "PackInstaller", "install_packs"]
