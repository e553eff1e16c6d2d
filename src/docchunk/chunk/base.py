"""Abstract base class for splitting strategies."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from docchunk.types import ChunkingOptions, ChunkingStrategy, Fragment

__all__ = ["BaseSplitter"]

logger = logging.getLogger(__name__)


class BaseSplitter(ABC):
    """Base class for all splitting strategies.

    Subclasses split raw text into an ordered list of ``Fragment`` objects.
    Splitters hold no state between calls; every accumulator is local to
    :meth:`split`.
    """

    strategy: ClassVar[ChunkingStrategy]

    @abstractmethod
    def split(self, text: str, options: ChunkingOptions) -> list[Fragment]:
        """Split text into fragments.

        Args:
            text: The original, unmodified document text.
            options: Chunking configuration (max size, strategy).

        Returns:
            Ordered fragments. Blank fragments may be included; the
            dispatcher drops them before assembly.
        """
