from __future__ import annotations

import pytest

from resetfit.identity import AnonymousIdentity


@pytest.mark.asyncio
async def test_anonymous_uid_is_kept_across_sessions(tmp_path) -> None:
    path = tmp_path / "state" / "identity"
    first = await AnonymousIdentity(str(path), user_id="").sign_in()
    second = await AnonymousIdentity(str(path), user_id="").sign_in()
    assert first and first == second
    assert path.read_text(encoding="utf-8").strip() == first


@pytest.mark.asyncio
async def test_configured_user_id_wins(tmp_path) -> None:
    ident = AnonymousIdentity(str(tmp_path / "identity"), user_id="fixed-uid")
    assert await ident.sign_in() == "fixed-uid"
    assert not (tmp_path / "identity").exists()


@pytest.mark.asyncio
async def test_unwritable_identity_gives_none(tmp_path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    ident = AnonymousIdentity(str(blocker / "identity"), user_id="")
    assert await ident.sign_in() is None
