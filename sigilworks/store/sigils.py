"""Sigil store — keyed, insertion-ordered collection of SigilRecords plus the
gnosis-session journal.

Owned by the application instance and injected into endpoints; there is no
module-level singleton. With a ``data_file`` the collection is loaded once at
construction and rewritten as JSON after every mutation.

Resonance grows by ``charge_boost`` on every charge (capped at 1.0) and decays
with a half-life measured from the last resonance update.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator

from sigilworks.models.sigil import GnosisSession, Manifestation, SigilPatch, SigilRecord

logger = logging.getLogger(__name__)

_SECONDS_PER_DAY = 86400.0


class SigilNotFoundError(KeyError):
    """No record with the requested id."""


class DuplicateSigilError(ValueError):
    """A record with this id already exists."""


def _as_utc(ts: datetime) -> datetime:
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def decayed_resonance(
    strength: float,
    since: datetime | None,
    now: datetime,
    half_life_days: float,
) -> float:
    """Strength after exponential decay from ``since`` to ``now``. No decay backwards in time."""
    if since is None or half_life_days <= 0:
        return strength
    elapsed_days = (_as_utc(now) - _as_utc(since)).total_seconds() / _SECONDS_PER_DAY
    if elapsed_days <= 0:
        return strength
    return strength * 0.5 ** (elapsed_days / half_life_days)


class SigilStore:
    """In-memory sigil collection with optional JSON persistence."""

    def __init__(
        self,
        data_file: Path | None = None,
        charge_boost: float = 0.1,
        half_life_days: float = 30.0,
    ) -> None:
        self.data_file = data_file
        self.charge_boost = charge_boost
        self.half_life_days = half_life_days
        self._records: dict[str, SigilRecord] = {}
        self._sessions: list[GnosisSession] = []
        if self.data_file is not None:
            self.data_file.parent.mkdir(parents=True, exist_ok=True)
            self._load()

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, sigil_id: object) -> bool:
        return sigil_id in self._records

    def create(self, record: SigilRecord) -> SigilRecord:
        if record.id in self._records:
            raise DuplicateSigilError(f"Sigil already exists: {record.id}")
        self._records[record.id] = record
        self._save()
        logger.info("Created sigil %s (%s)", record.id, record.paradigm.value)
        return record

    def get(self, sigil_id: str) -> SigilRecord:
        try:
            return self._records[sigil_id]
        except KeyError:
            raise SigilNotFoundError(sigil_id) from None

    def all(self) -> list[SigilRecord]:
        """All records in insertion order."""
        return list(self._records.values())

    def __iter__(self) -> Iterator[SigilRecord]:
        return iter(self.all())

    def update(self, sigil_id: str, patch: SigilPatch) -> SigilRecord:
        """Apply the fields present on ``patch``; absent fields are left alone."""
        current = self.get(sigil_id)
        changes = patch.model_dump(exclude_unset=True)
        if "resonance_strength" in changes:
            changes["resonance_updated_at"] = datetime.now(timezone.utc)
        updated = current.model_copy(update=changes)
        self._records[sigil_id] = updated
        self._save()
        logger.info("Updated sigil %s: %s", sigil_id, sorted(changes))
        return updated

    def _charged(self, record: SigilRecord, ts: datetime) -> SigilRecord:
        strength = decayed_resonance(
            record.resonance_strength,
            record.resonance_updated_at,
            ts,
            self.half_life_days,
        )
        return record.model_copy(
            update={
                "charge_events": [*record.charge_events, ts],
                "resonance_strength": min(1.0, strength + self.charge_boost),
                "resonance_updated_at": max(ts, _as_utc(record.resonance_updated_at or ts)),
            }
        )

    def append_charge(self, sigil_id: str, timestamp: datetime | None = None) -> SigilRecord:
        """Record a charge event; resonance decays up to the charge, then grows."""
        current = self.get(sigil_id)
        ts = _as_utc(timestamp or datetime.now(timezone.utc))
        updated = self._charged(current, ts)
        self._records[sigil_id] = updated
        self._save()
        logger.info(
            "Charged sigil %s (%d charges, resonance %.3f)",
            sigil_id,
            len(updated.charge_events),
            updated.resonance_strength,
        )
        return updated

    def add_manifestation(self, sigil_id: str, manifestation: Manifestation) -> SigilRecord:
        """Attach an observed outcome to a sigil."""
        current = self.get(sigil_id)
        updated = current.model_copy(update={"manifestations": [*current.manifestations, manifestation]})
        self._records[sigil_id] = updated
        self._save()
        logger.info("Recorded manifestation %s for sigil %s", manifestation.id, sigil_id)
        return updated

    def record_session(self, session: GnosisSession) -> GnosisSession:
        """Journal a gnosis session and charge every sigil it names at the session date.

        All ids are checked before anything changes, so an unknown id leaves the
        store untouched.
        """
        for sigil_id in session.sigils_charged:
            self.get(sigil_id)
        ts = _as_utc(session.date)
        for sigil_id in dict.fromkeys(session.sigils_charged):
            self._records[sigil_id] = self._charged(self._records[sigil_id], ts)
        self._sessions.append(session)
        self._save()
        logger.info(
            "Recorded %s session %s charging %d sigils",
            session.method.value,
            session.id,
            len(session.sigils_charged),
        )
        return session

    def sessions(self) -> list[GnosisSession]:
        """Gnosis sessions in the order they were recorded."""
        return list(self._sessions)

    def apply_decay(self, now: datetime | None = None) -> int:
        """Decay every record's resonance to ``now``. Returns how many changed."""
        when = _as_utc(now or datetime.now(timezone.utc))
        changed = 0
        for sigil_id, record in list(self._records.items()):
            strength = decayed_resonance(
                record.resonance_strength,
                record.resonance_updated_at,
                when,
                self.half_life_days,
            )
            if strength == record.resonance_strength:
                continue
            self._records[sigil_id] = record.model_copy(
                update={"resonance_strength": strength, "resonance_updated_at": when}
            )
            changed += 1
        if changed:
            self._save()
        logger.info("Applied resonance decay to %d sigils", changed)
        return changed

    def _load(self) -> None:
        if self.data_file is None or not self.data_file.exists():
            return
        with open(self.data_file, encoding="utf-8") as f:
            data = json.load(f)
        records = [SigilRecord.model_validate(item) for item in data.get("sigils", [])]
        self._records = {r.id: r for r in records}
        self._sessions = [GnosisSession.model_validate(item) for item in data.get("sessions", [])]
        logger.info(
            "Loaded %d sigils and %d sessions from %s",
            len(self._records),
            len(self._sessions),
            self.data_file,
        )

    def _save(self) -> None:
        if self.data_file is None:
            return
        payload = {
            "sigils": [r.model_dump(mode="json") for r in self._records.values()],
            "sessions": [s.model_dump(mode="json") for s in self._sessions],
        }
        with open(self.data_file, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
