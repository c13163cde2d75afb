import threading

from resizepdf.artifacts import Artifact, ArtifactStore

from .conftest import FakeClock


def test_put_then_get_returns_artifact():
    clock = FakeClock()
    store = ArtifactStore(600, mimetype="application/pdf", clock=clock)
    artifact_id = store.put("page-1.pdf", b"%PDF-data")

    artifact = store.get(artifact_id)
    assert isinstance(artifact, Artifact)
    assert artifact.filename == "page-1.pdf"
    assert artifact.payload == b"%PDF-data"
    assert artifact.created_at == clock.now
    assert artifact.mimetype == "application/pdf"


def test_get_is_read_many():
    store = ArtifactStore(600, clock=FakeClock())
    artifact_id = store.put("a.pdf", b"abc")
    assert store.get(artifact_id).payload == store.get(artifact_id).payload == b"abc"
    assert len(store) == 1


def test_get_unknown_or_malformed_id_is_none():
    store = ArtifactStore(600, clock=FakeClock())
    assert store.get("nope") is None
    assert store.get("") is None
    assert store.get(None) is None


def test_get_does_not_check_age():
    clock = FakeClock()
    store = ArtifactStore(600, clock=clock)
    artifact_id = store.put("a.pdf", b"abc")
    clock.advance(3600)
    assert store.get(artifact_id) is not None


def test_sweep_removes_only_expired():
    clock = FakeClock()
    store = ArtifactStore(600, clock=clock)
    old = store.put("old.pdf", b"1")
    clock.advance(500)
    young = store.put("young.pdf", b"2")
    clock.advance(101)

    assert store.sweep() == 1
    assert old not in store
    assert young in store


def test_sweep_keeps_artifact_exactly_at_ttl():
    clock = FakeClock()
    store = ArtifactStore(600, clock=clock)
    artifact_id = store.put("a.pdf", b"1")
    assert store.sweep(now=clock.now + 600) == 0
    assert store.sweep(now=clock.now + 600.5) == 1
    assert store.get(artifact_id) is None


def test_put_batch_sweeps_first_and_keeps_order():
    clock = FakeClock()
    store = ArtifactStore(600, clock=clock)
    stale = store.put("stale.pdf", b"x")
    clock.advance(601)

    refs = store.put_batch([("page-1.pdf", b"1"), ("page-2.pdf", b"2")])
    assert [r["filename"] for r in refs] == ["page-1.pdf", "page-2.pdf"]
    assert stale not in store
    assert [store.get(r["id"]).payload for r in refs] == [b"1", b"2"]


def test_ids_are_unique_within_same_instant():
    store = ArtifactStore(600, clock=FakeClock())
    ids = {store.put(f"{i}.pdf", b"x") for i in range(200)}
    assert len(ids) == 200


def test_concurrent_puts_do_not_collide():
    store = ArtifactStore(600)
    ids = []
    lock = threading.Lock()

    def worker():
        local = [store.put("x.pdf", b"x") for _ in range(100)]
        with lock:
            ids.extend(local)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(set(ids)) == 800
    assert len(store) == 800
