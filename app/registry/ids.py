import uuid

from app.core.config import ID_MAX_ATTEMPTS
from app.core.errors import IdentityExhaustedError


class IdentityGenerator:
    """Issues ids for one entity kind.

    Every issued id is remembered for the life of the process, so an id is
    never handed out twice, even after the record it named was deleted.
    The set grows by one entry per create and is never pruned; that memory
    is what the never-reuse guarantee costs.
    Not thread-safe on its own: the owning store calls ``next_id`` with its
    write lock held.
    """

    def __init__(self, kind: str, max_attempts: int = ID_MAX_ATTEMPTS):
        self.kind = kind
        self.max_attempts = max_attempts
        self._issued: set[str] = set()

    def next_id(self) -> str:
        for _ in range(self.max_attempts):
            candidate = str(uuid.uuid4())
            if candidate not in self._issued:
                self._issued.add(candidate)
                return candidate
        raise IdentityExhaustedError(self.kind, self.max_attempts)

    def issued(self, entity_id: str) -> bool:
        return entity_id in self._issued
