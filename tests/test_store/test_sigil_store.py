"""Tests for the sigil store."""

from datetime import datetime, timedelta, timezone

import pytest

from sigilworks.engine.synthesizer import generate
from sigilworks.models.sigil import GnosisMethod, GnosisSession, Manifestation, SigilPatch, SigilRecord
from sigilworks.store.sigils import (
    DuplicateSigilError,
    SigilNotFoundError,
    SigilStore,
    decayed_resonance,
)
from tests.conftest import FLY_STATEMENT, SUCCESS_STATEMENT

T0 = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def _record(sigil_id: str, statement: str = SUCCESS_STATEMENT, paradigm: str = "chaos") -> SigilRecord:
    sigil = generate(statement, paradigm)
    record = SigilRecord.from_generated(sigil, id=sigil_id)
    return record.model_copy(update={"created_at": T0, "resonance_updated_at": T0})


def test_create_and_get(store):
    record = store.create(_record("s1"))
    assert store.get("s1") == record
    assert "s1" in store
    assert len(store) == 1


def test_insertion_order(store):
    for sigil_id in ["c", "a", "b"]:
        store.create(_record(sigil_id))
    assert [r.id for r in store.all()] == ["c", "a", "b"]
    assert [r.id for r in store] == ["c", "a", "b"]


def test_duplicate_id_rejected(store):
    store.create(_record("s1"))
    with pytest.raises(DuplicateSigilError):
        store.create(_record("s1", FLY_STATEMENT))


def test_missing_id(store):
    with pytest.raises(SigilNotFoundError):
        store.get("nope")
    with pytest.raises(KeyError):
        store.append_charge("nope")


def test_update_applies_only_set_fields(store):
    original = store.create(_record("s1"))
    updated = store.update("s1", SigilPatch(gnosis_method=GnosisMethod.DANCE, lunar_phase="waxing"))
    assert updated.gnosis_method is GnosisMethod.DANCE
    assert updated.lunar_phase == "waxing"
    assert updated.path_data == original.path_data
    assert updated.resonance_strength == original.resonance_strength
    assert store.get("s1") == updated


def test_update_resonance_restamps(store):
    store.create(_record("s1"))
    updated = store.update("s1", SigilPatch(resonance_strength=0.9))
    assert updated.resonance_strength == 0.9
    assert updated.resonance_updated_at > T0


def test_append_charge_grows_resonance(store):
    store.create(_record("s1"))
    charged = store.append_charge("s1", T0)
    assert charged.charge_events == [T0]
    assert charged.resonance_strength == pytest.approx(0.6)

    charged = store.append_charge("s1", T0 + timedelta(minutes=1))
    assert len(charged.charge_events) == 2
    assert charged.charge_events[0] == T0


def test_charge_caps_at_one(store):
    store.create(_record("s1"))
    for _ in range(10):
        charged = store.append_charge("s1", T0)
    assert charged.resonance_strength == 1.0
    assert len(charged.charge_events) == 10


def test_charge_after_long_gap_decays_first():
    store = SigilStore(charge_boost=0.1, half_life_days=30.0)
    store.create(_record("s1"))
    charged = store.append_charge("s1", T0 + timedelta(days=30))
    assert charged.resonance_strength == pytest.approx(0.25 + 0.1)


def test_apply_decay_halves_after_half_life(store):
    store.create(_record("s1"))
    store.create(_record("s2", FLY_STATEMENT))
    changed = store.apply_decay(T0 + timedelta(days=30))
    assert changed == 2
    assert store.get("s1").resonance_strength == pytest.approx(0.25)
    assert store.get("s1").resonance_updated_at == T0 + timedelta(days=30)


def test_apply_decay_never_runs_backwards(store):
    store.create(_record("s1"))
    assert store.apply_decay(T0 - timedelta(days=5)) == 0
    assert store.get("s1").resonance_strength == 0.5


def test_decayed_resonance_handles_naive_times():
    naive = datetime(2024, 3, 1, 12, 0)
    assert decayed_resonance(0.8, naive, T0 + timedelta(days=60), 30.0) == pytest.approx(0.2)
    assert decayed_resonance(0.8, None, T0, 30.0) == 0.8


def test_persistence_round_trip(tmp_path):
    data_file = tmp_path / "sigils.json"
    store = SigilStore(data_file=data_file)
    store.create(_record("s1"))
    store.create(_record("s2", FLY_STATEMENT, "shamanic"))
    store.append_charge("s1", T0 + timedelta(hours=1))

    reloaded = SigilStore(data_file=data_file)
    assert [r.id for r in reloaded.all()] == ["s1", "s2"]
    assert reloaded.get("s1").model_dump() == store.get("s1").model_dump()
    assert reloaded.get("s2").paradigm.value == "shamanic"


def test_store_without_file_writes_nothing(tmp_path, store):
    store.create(_record("s1"))
    assert list(tmp_path.iterdir()) == []


def test_update_clears_optional_field(store):
    store.create(_record("s1"))
    store.update("s1", SigilPatch(lunar_phase="waning", planetary_hour="saturn"))
    updated = store.update("s1", SigilPatch(lunar_phase=None))
    assert updated.lunar_phase is None
    assert updated.planetary_hour == "saturn"


def test_patch_rejects_null_for_required_fields():
    with pytest.raises(ValueError):
        SigilPatch(gnosis_method=None)
    with pytest.raises(ValueError):
        SigilPatch(resonance_strength=None)
    assert SigilPatch().model_dump(exclude_unset=True) == {}


def test_add_manifestation(store):
    store.create(_record("s1"))
    first = Manifestation(date=T0, description="Call from an old friend", confidence=0.7)
    second = Manifestation(date=T0 + timedelta(days=1), description="Dream of the glyph", emotional_resonance=-0.2)
    store.add_manifestation("s1", first)
    updated = store.add_manifestation("s1", second)
    assert [m.description for m in updated.manifestations] == ["Call from an old friend", "Dream of the glyph"]
    assert updated.manifestations[0].id != updated.manifestations[1].id
    assert updated.charge_events == []
    with pytest.raises(SigilNotFoundError):
        store.add_manifestation("nope", first)


def test_record_session_charges_each_sigil_once(store):
    store.create(_record("s1"))
    store.create(_record("s2", FLY_STATEMENT))
    session = GnosisSession(date=T0, method=GnosisMethod.DANCE, sigils_charged=["s1", "s2", "s1"])
    store.record_session(session)
    assert store.get("s1").charge_events == [T0]
    assert store.get("s2").resonance_strength == pytest.approx(0.6)
    assert store.sessions() == [session]


def test_record_session_unknown_sigil_changes_nothing(store):
    store.create(_record("s1"))
    with pytest.raises(SigilNotFoundError):
        store.record_session(GnosisSession(date=T0, sigils_charged=["s1", "ghost"]))
    assert store.get("s1").charge_events == []
    assert store.sessions() == []


def test_persistence_keeps_manifestations_and_sessions(tmp_path):
    data_file = tmp_path / "sigils.json"
    store = SigilStore(data_file=data_file)
    store.create(_record("s1"))
    store.add_manifestation("s1", Manifestation(date=T0, description="Sign", synchronicities=["owl"]))
    store.record_session(GnosisSession(date=T0, duration_minutes=15, sigils_charged=["s1"], notes="quiet"))

    reloaded = SigilStore(data_file=data_file)
    assert reloaded.get("s1").manifestations[0].synchronicities == ["owl"]
    assert reloaded.sessions()[0].notes == "quiet"
    assert reloaded.get("s1").model_dump() == store.get("s1").model_dump()
