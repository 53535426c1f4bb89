# english_inflect/core/classical.py
from __future__ import annotations

from typing import Optional

from english_inflect.core.domain.models import ClassicalFlags
from english_inflect.core.locks import ReadWriteLock
from english_inflect.shared.logging_setup import get_logger

log = get_logger(__name__)


class ClassicalMode:
    """
    Holder for the current ClassicalFlags snapshot.

    Setters build a new frozen snapshot and swap it in under the write lock;
    ``snapshot()`` hands readers the current one.
    """

    def __init__(self, flags: Optional[ClassicalFlags] = None):
        self._lock = ReadWriteLock()
        self._flags = flags or ClassicalFlags()

    def snapshot(self) -> ClassicalFlags:
        with self._lock.read():
            return self._flags

    def replace(self, flags: ClassicalFlags) -> None:
        with self._lock.write():
            self._flags = flags
        log.debug("classical_flags_replaced", **flags.model_dump())

    def set_all(self, enabled: bool) -> None:
        self.replace(ClassicalFlags.everything(enabled))

    def set_flag(self, name: str, enabled: bool) -> None:
        if name not in ClassicalFlags.model_fields or name == "all":
            raise ValueError(f"Unknown classical flag: {name!r}")
        with self._lock.write():
            self._flags = self._flags.model_copy(update={name: bool(enabled)})
        log.debug("classical_flag_set", flag=name, enabled=bool(enabled))
