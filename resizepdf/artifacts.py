"""
resizepdf/artifacts.py

Holds generated output files in memory for a short time so a client can fetch
them by id after the request that produced them.

- `put(filename, payload) -> id`: stores bytes and returns a fresh id.
- `get(id) -> Artifact | None`: read-many; never evicts.
- `sweep(now=None) -> int`: drops items older than the TTL.
- `put_batch(items)`: sweep, then put every `(filename, payload)` in order.

Nothing is persisted; a restart loses every artifact.
"""

import io
import itertools
import logging
import secrets
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from flask import abort, current_app, send_file

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 10 * 60


@dataclass(frozen=True)
class Artifact:
    id: str
    filename: str
    payload: bytes
    created_at: float
    mimetype: str = "application/octet-stream"


class ArtifactStore:
    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        mimetype: str = "application/octet-stream",
        clock: Callable[[], float] = time.time,
    ):
        self.ttl_seconds = ttl_seconds
        self.mimetype = mimetype
        self._clock = clock
        self._items: Dict[str, Artifact] = {}
        self._seq = itertools.count()
        self._lock = threading.Lock()

    def _new_id(self) -> str:
        # millisecond timestamp + per-store sequence + random suffix
        stamp = int(self._clock() * 1000)
        return f"{stamp}-{next(self._seq)}-{secrets.token_urlsafe(6)}"

    def put(self, filename: str, payload: bytes) -> str:
        with self._lock:
            artifact_id = self._new_id()
            self._items[artifact_id] = Artifact(
                id=artifact_id,
                filename=filename,
                payload=bytes(payload),
                created_at=self._clock(),
                mimetype=self.mimetype,
            )
        return artifact_id

    def get(self, artifact_id: str) -> Optional[Artifact]:
        if not isinstance(artifact_id, str):
            return None
        with self._lock:
            return self._items.get(artifact_id)

    def sweep(self, now: Optional[float] = None) -> int:
        if now is None:
            now = self._clock()
        with self._lock:
            expired = [k for k, a in self._items.items() if now - a.created_at > self.ttl_seconds]
            for k in expired:
                del self._items[k]
        if expired:
            logger.debug("[ARTIFACTS] swept %d expired item(s)", len(expired))
        return len(expired)

    def put_batch(self, items: Iterable[Tuple[str, bytes]]) -> List[Dict[str, str]]:
        self.sweep()
        return [{"id": self.put(name, data), "filename": name} for name, data in items]

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __contains__(self, artifact_id) -> bool:
        return self.get(artifact_id) is not None


# ------------------ Flask glue ------------------

SPLIT_STORE = "split"
IMAGE_STORE = "images"


def init_stores(app) -> None:
    ttl = app.config.get("ARTIFACT_TTL_SECONDS", DEFAULT_TTL_SECONDS)
    stores = app.extensions.setdefault("artifact_stores", {})
    stores.setdefault(SPLIT_STORE, ArtifactStore(ttl, mimetype="application/pdf"))
    stores.setdefault(IMAGE_STORE, ArtifactStore(ttl, mimetype="image/jpeg"))


def get_store(name: str) -> ArtifactStore:
    return current_app.extensions["artifact_stores"][name]


def send_artifact(name: str, artifact_id: Optional[str]):
    """Stream a stored artifact as an attachment, or 404 if it is gone."""
    if not artifact_id:
        abort(400, "File ID required")
    artifact = get_store(name).get(artifact_id)
    if artifact is None:
        abort(404, "File not found or expired")
    return send_file(
        io.BytesIO(artifact.payload),
        as_attachment=True,
        download_name=artifact.filename,
        mimetype=artifact.mimetype,
    )
