"""KYC gate - decides whether a host may publish events."""

from accounts.domain import KycRecord, KycStatus
from accounts.stores.interfaces import KycStore


class KycGate:
    """Reads a host's verification status and applies the publication rule."""

    def __init__(self, store: KycStore) -> None:
        self._store = store

    def record(self, owner_id: str) -> KycRecord:
        """Return the owner's record, or an empty one with status NONE."""
        record = self._store.get_record(owner_id)
        if record is None:
            return KycRecord(owner_id=owner_id, status=KycStatus.NONE)
        return record

    def status(self, owner_id: str) -> KycStatus:
        return self.record(owner_id).status

    @staticmethod
    def permits_publication(status: KycStatus) -> bool:
        return status is KycStatus.VERIFIED
