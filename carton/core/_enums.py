from __future__ import annotations

from enum import Enum


class OptionVariant(str, Enum):
    """
    Tag of an Option container.

    - PRESENT: the container holds exactly one value
    - ABSENT: the container holds nothing (originally empty, or drained by a consuming read)
    """
    PRESENT = "present"
    ABSENT = "absent"


class ResultVariant(str, Enum):
    """
    Tag of a Result container.

    - OK: holds a success value
    - ERR: holds a failure cause
    - DRAINED: the payload was handed out by a consuming read; nothing is recoverable
    """
    OK = "ok"
    ERR = "err"
    DRAINED = "drained"


class EitherVariant(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class AbsencePolicy(str, Enum):
    """
    Decides which raw values ``Option.wrap`` treats as absent.

    - NONE_ONLY: only ``None`` and the ``NOTHING`` marker (default)
    - FALSY: any falsy value (``0``, ``""``, ``[]``, ``False``...) is absent as well
    """
    NONE_ONLY = "none_only"
    FALSY = "falsy"
