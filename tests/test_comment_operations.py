import pytest

from campsite_api.domain.exceptions import (
    ConcurrentModificationError,
    ForbiddenError,
    NotFoundError,
    UnauthenticatedError,
)


@pytest.fixture()
def seeded(service, campsite, principals):
    """Campsite with m1 by u1 then m2 by u2."""
    service.add_comment(campsite.id, "Great views", principals["u1"], rating=5)
    site = service.add_comment(campsite.id, "Too many bugs", principals["u2"], rating=2)
    m1, m2 = site.comments
    return site, m1, m2


def test_add_comment_sets_author_from_caller(service, campsite, principals):
    site = service.add_comment(campsite.id, "Lovely", principals["u1"], rating=4)
    comment = site.comments[-1]
    assert comment.author_id == "user-1"
    assert comment.rating == 4


def test_add_comment_needs_principal_and_campsite(service, campsite, principals):
    with pytest.raises(UnauthenticatedError):
        service.add_comment(campsite.id, "anon", None)
    with pytest.raises(NotFoundError):
        service.add_comment("missing", "where", principals["u1"])


def test_list_and_get_comments(service, seeded):
    site, m1, m2 = seeded
    view = service.list_comments(site.id)
    assert [c.id for c in view.comments] == [m1.id, m2.id]
    assert view.authors["user-2"].first_name == "Tomas"

    single = service.get_comment(site.id, m2.id)
    assert [c.text for c in single.comments] == ["Too many bugs"]


def test_get_missing_comment(service, seeded):
    site, _m1, _m2 = seeded
    with pytest.raises(NotFoundError, match="Comment nope not found"):
        service.get_comment(site.id, "nope")
    with pytest.raises(NotFoundError, match="Campsite missing not found"):
        service.list_comments("missing")


def test_author_updates_own_comment(service, seeded, principals):
    site, m1, m2 = seeded
    outcome = service.update_comment(site.id, m1.id, "Great views at dawn", principals["u1"])
    assert not outcome.denied

    stored = service.get_one(site.id).campsite
    assert stored.find_comment(m1.id).text == "Great views at dawn"
    assert stored.find_comment(m1.id).rating == 5
    assert stored.find_comment(m2.id).text == "Too many bugs"


def test_empty_text_leaves_comment_unchanged(service, seeded, principals):
    site, m1, _m2 = seeded
    outcome = service.update_comment(site.id, m1.id, "", principals["u1"])
    assert not outcome.denied
    assert service.get_comment(site.id, m1.id).comments[0].text == "Great views"


@pytest.mark.parametrize("who", ["u2", "admin"])
def test_non_author_update_is_soft_denied(service, seeded, principals, who):
    site, m1, _m2 = seeded
    outcome = service.update_comment(site.id, m1.id, "hijacked", principals[who])
    assert outcome.denied
    assert outcome.denied_message == "Forbidden: You can only edit your own comments"
    assert outcome.campsite is None
    assert service.get_comment(site.id, m1.id).comments[0].text == "Great views"


def test_non_author_delete_is_soft_denied(service, seeded, principals):
    site, m1, m2 = seeded
    outcome = service.delete_comment(site.id, m1.id, principals["u2"])
    assert outcome.denied_message == "Forbidden: You can only delete your own comments"
    assert [c.id for c in service.list_comments(site.id).comments] == [m1.id, m2.id]


def test_delete_keeps_order_and_second_delete_is_not_found(service, campsite, principals):
    for text in ("one", "two", "three"):
        site = service.add_comment(campsite.id, text, principals["u1"])
    first, second, third = site.comments

    outcome = service.delete_comment(campsite.id, second.id, principals["u1"])
    assert [c.id for c in outcome.campsite.comments] == [first.id, third.id]

    with pytest.raises(NotFoundError):
        service.delete_comment(campsite.id, second.id, principals["u1"])


def test_update_missing_targets(service, seeded, principals):
    site, m1, _m2 = seeded
    with pytest.raises(NotFoundError, match="Campsite missing not found"):
        service.update_comment("missing", m1.id, "x", principals["u1"])
    with pytest.raises(NotFoundError, match="Comment nope not found"):
        service.update_comment(site.id, "nope", "x", principals["u1"])


def test_clear_comments_by_admin(service, seeded, principals):
    site, _m1, _m2 = seeded
    cleared = service.clear_comments(site.id, principals["admin"])
    assert cleared.comments == []
    assert service.list_comments(site.id).comments == []


def test_clear_comments_by_non_admin_is_forbidden(service, seeded, principals):
    site, m1, m2 = seeded
    with pytest.raises(ForbiddenError):
        service.clear_comments(site.id, principals["u1"])
    assert [c.id for c in service.list_comments(site.id).comments] == [m1.id, m2.id]


def test_clear_comments_missing_campsite(service, principals):
    with pytest.raises(NotFoundError):
        service.clear_comments("missing", principals["admin"])


def _land_write_after_next_fetch(monkeypatch, repository, write):
    """Let ``write`` commit between the next fetch and the caller's save."""
    fetch = repository.find_by_id

    def fetch_then_write(campsite_id):
        loaded = fetch(campsite_id)
        monkeypatch.setattr(repository, "find_by_id", fetch)
        write(campsite_id)
        return loaded

    monkeypatch.setattr(repository, "find_by_id", fetch_then_write)


def test_update_racing_a_delete_is_a_conflict(service, campsite_repository, seeded, principals, monkeypatch):
    site, m1, m2 = seeded
    _land_write_after_next_fetch(
        monkeypatch,
        campsite_repository,
        lambda campsite_id: service.delete_comment(campsite_id, m2.id, principals["u2"]),
    )

    with pytest.raises(ConcurrentModificationError):
        service.update_comment(site.id, m1.id, "edited", principals["u1"])

    remaining = service.list_comments(site.id).comments
    assert [(c.id, c.text) for c in remaining] == [(m1.id, "Great views")]


def test_delete_racing_an_update_is_a_conflict(service, campsite_repository, seeded, principals, monkeypatch):
    site, m1, m2 = seeded
    _land_write_after_next_fetch(
        monkeypatch,
        campsite_repository,
        lambda campsite_id: service.update_comment(campsite_id, m1.id, "edited", principals["u1"]),
    )

    with pytest.raises(ConcurrentModificationError):
        service.delete_comment(site.id, m2.id, principals["u2"])

    remaining = service.list_comments(site.id).comments
    assert [(c.id, c.text) for c in remaining] == [(m1.id, "edited"), (m2.id, "Too many bugs")]
