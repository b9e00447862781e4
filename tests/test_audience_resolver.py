"""Unit tests for :class:`AudienceResolver` using in-memory collaborators."""

from __future__ import annotations

import pytest

from activity_fanout.application.audience import AudienceResolver
from activity_fanout.application.targets import TargetRegistry
from activity_fanout.domain.entities import Page
from activity_fanout.domain.errors import NotFoundError, TargetNotFoundError, ValidationError

from conftest import FakeUserDirectory, FakeWatcherDirectory, make_activity

ACTOR, WATCHER, IGNORER, SUSPENDED = 1, 2, 3, 4


def _registry(pages: dict[int, Page]) -> TargetRegistry:
    def load_page(page_id: int) -> Page:
        try:
            return pages[page_id]
        except KeyError as exc:
            raise NotFoundError(f"Page {page_id} missing") from exc

    registry = TargetRegistry()
    registry.register("Page", load_page)
    return registry


@pytest.fixture()
def watchers() -> FakeWatcherDirectory:
    return FakeWatcherDirectory()


@pytest.fixture()
def users() -> FakeUserDirectory:
    return FakeUserDirectory(suspended={SUSPENDED})


@pytest.fixture()
def resolver(watchers, users) -> AudienceResolver:
    page = Page(id=100, path="/sandbox", creator_id=ACTOR, commenter_ids={SUSPENDED, IGNORER})
    return AudienceResolver(_registry({100: page}), watchers, users)


def test_comment_scenario_notifies_only_the_watcher(resolver, watchers) -> None:
    """The actor, the ignorer and the suspended commenter are all left out."""

    watchers.watch(WATCHER, 100, "WATCH")
    watchers.watch(IGNORER, 100, "IGNORE")

    audience = resolver.resolve(make_activity(1, ACTOR))

    assert audience == {WATCHER}


def test_actor_is_never_notified_about_their_own_activity(resolver, watchers) -> None:
    watchers.watch(ACTOR, 100, "WATCH")

    assert ACTOR not in resolver.resolve(make_activity(1, ACTOR))


def test_suspended_interested_party_is_excluded(resolver, watchers) -> None:
    watchers.watch(SUSPENDED, 100, "WATCH")

    assert SUSPENDED not in resolver.resolve(make_activity(1, WATCHER))


def test_ignorer_is_excluded_even_when_interested_party(resolver, watchers) -> None:
    watchers.watch(IGNORER, 100, "IGNORE")

    # The ignorer commented on the page, so it is also an interested party.
    assert IGNORER not in resolver.resolve(make_activity(1, WATCHER))


def test_switching_from_watch_to_ignore(resolver, watchers) -> None:
    watchers.watch(WATCHER, 100, "WATCH")
    assert WATCHER in resolver.resolve(make_activity(1, ACTOR))

    watchers.watch(WATCHER, 100, "IGNORE")
    assert WATCHER not in resolver.resolve(make_activity(2, ACTOR, minutes=1))


def test_interested_parties_are_included_and_deduplicated(resolver, watchers, users) -> None:
    watchers.watch(IGNORER, 100, "WATCH")

    audience = resolver.resolve(make_activity(1, WATCHER))

    assert audience == {ACTOR, IGNORER}
    assert users.calls[-1] == {ACTOR, IGNORER, SUSPENDED}


def test_user_directory_skipped_when_nobody_is_eligible(watchers, users) -> None:
    page = Page(id=100, path="/lonely", creator_id=ACTOR)
    resolver = AudienceResolver(_registry({100: page}), watchers, users)

    assert resolver.resolve(make_activity(1, ACTOR)) == set()
    assert users.calls == []


def test_missing_target_raises_target_not_found(resolver) -> None:
    with pytest.raises(TargetNotFoundError) as excinfo:
        resolver.resolve(make_activity(1, ACTOR, target_id=404))

    assert excinfo.value.target_id == 404


def test_registry_without_loader_raises_target_not_found(watchers, users) -> None:
    resolver = AudienceResolver(TargetRegistry(), watchers, users)

    with pytest.raises(TargetNotFoundError):
        resolver.resolve(make_activity(1, ACTOR))


def test_registry_rejects_unregistered_target_kind() -> None:
    with pytest.raises(ValidationError):
        TargetRegistry().register("Revision", lambda target_id: None)
