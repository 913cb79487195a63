from __future__ import annotations

import logging
import os
import uuid
from pathlib import Path

from resetfit.config import settings


logger = logging.getLogger(__name__)


class AnonymousIdentity:
    """
    Stable anonymous user id.

    A configured ``USER_ID`` wins; otherwise a random id is generated once and
    kept in ``identity_path`` so later sessions see the same user.
    """

    def __init__(self, identity_path: str | None = None, user_id: str | None = None):
        self.identity_path = Path(identity_path or settings.identity_path)
        self._fixed = user_id if user_id is not None else settings.user_id
        self.uid: str | None = None

    def _load_or_create(self) -> str:
        if self.identity_path.exists():
            uid = self.identity_path.read_text(encoding="utf-8").strip()
            if uid:
                return uid
        uid = uuid.uuid4().hex
        if self.identity_path.parent and str(self.identity_path.parent) not in ("", "."):
            os.makedirs(self.identity_path.parent, exist_ok=True)
        self.identity_path.write_text(uid + "\n", encoding="utf-8")
        return uid

    async def sign_in(self) -> str | None:
        """Returns the uid, or None when no identity could be established."""
        if self._fixed:
            self.uid = self._fixed
            return self.uid
        try:
            self.uid = self._load_or_create()
        except OSError:
            logger.exception("AUTH_ERROR: cannot read or create identity file %s", self.identity_path)
            self.uid = None
        return self.uid
