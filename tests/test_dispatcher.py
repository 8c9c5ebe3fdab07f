"""Tests for request dispatching."""

from photo_contest.services.dispatcher import Dispatcher
from photo_contest.services.registry import PhotoRegistry
from tests.conftest import IMAGE_URI


def test_register_user_envelopes(dispatcher: Dispatcher) -> None:
    first = dispatcher.register_user("alice")
    second = dispatcher.register_user("alice")

    assert first.status_code == 200
    assert first.envelope.to_dict() == {"status": "success"}
    assert second.status_code == 200
    assert second.envelope.to_dict() == {
        "status": "error",
        "message": "User already registered",
    }


def test_register_user_without_userid(dispatcher: Dispatcher) -> None:
    result = dispatcher.register_user(None)

    assert result.envelope.to_dict() == {
        "status": "error",
        "message": "User id is required",
    }


def test_unregistered_user_rejected_before_registry(
    dispatcher: Dispatcher, registry: PhotoRegistry
) -> None:
    registry.submit_photo("alice", "Oxford", IMAGE_URI)

    results = [
        dispatcher.list_photos("bob"),
        dispatcher.list_photos(None, "0"),
        dispatcher.submit_photo("bob", "Leeds", IMAGE_URI),
        dispatcher.vote("", "0"),
        dispatcher.comment("bob", "0", "Nice"),
    ]

    for result in results:
        assert result.status_code == 400
        assert result.envelope.to_dict() == {
            "status": "error",
            "message": "User not registered",
        }
    entry = registry.get_photo("0")
    assert entry.votes == 0
    assert entry.comments == ()
    assert registry.photo_count == 1


def test_submit_and_list(dispatcher: Dispatcher) -> None:
    dispatcher.register_user("alice")

    submitted = dispatcher.submit_photo("alice", "Oxford", IMAGE_URI)
    listed = dispatcher.list_photos("alice")
    single = dispatcher.list_photos("alice", "0")

    assert submitted.envelope.data == {"id": "0"}
    expected = {
        "user": "alice",
        "id": "0",
        "votes": 0,
        "location": "Oxford",
        "uri": IMAGE_URI,
        "comments": [],
    }
    assert listed.envelope.data == [expected]
    assert single.envelope.data == expected


def test_submit_invalid_uri(dispatcher: Dispatcher) -> None:
    dispatcher.register_user("alice")

    result = dispatcher.submit_photo("alice", "Oxford", "file:///tmp/cat.jpg")

    assert result.status_code == 200
    assert result.envelope.to_dict() == {
        "status": "error",
        "message": "Only base64 encoded images are supported",
    }


def test_missing_records(dispatcher: Dispatcher) -> None:
    dispatcher.register_user("alice")

    for result in (
        dispatcher.list_photos("alice"),
        dispatcher.list_photos("alice", "3"),
        dispatcher.vote("alice", "3"),
        dispatcher.comment("alice", "3", "Nice"),
    ):
        assert result.status_code == 200
        assert result.envelope.to_dict() == {
            "status": "error",
            "message": "No matching records",
        }


def test_vote_and_comment(dispatcher: Dispatcher, registry: PhotoRegistry) -> None:
    dispatcher.register_user("alice")
    dispatcher.submit_photo("alice", "Oxford", IMAGE_URI)

    vote = dispatcher.vote("alice", "0")
    comment = dispatcher.comment("alice", "0", "Nice shot")
    empty = dispatcher.comment("alice", "0", "")

    assert vote.envelope.to_dict() == {"status": "success"}
    assert comment.envelope.to_dict() == {"status": "success"}
    assert empty.envelope.message == "Comment must not be empty"
    entry = registry.get_photo("0")
    assert entry.votes == 1
    assert entry.comments == ("Nice shot",)


def test_reject_malformed(dispatcher: Dispatcher) -> None:
    dispatcher.register_user("alice")

    unknown = dispatcher.reject_malformed("vote", "bob")
    not_a_string = dispatcher.reject_malformed("vote", 5)
    known = dispatcher.reject_malformed("submit_photo", "alice")
    registration = dispatcher.reject_malformed(
        "register_user", None, requires_registration=False
    )

    assert unknown.status_code == 400
    assert unknown.envelope.message == "User not registered"
    assert not_a_string.status_code == 400
    assert known.status_code == 200
    assert known.envelope.to_dict() == {
        "status": "error",
        "message": "Invalid request body",
    }
    assert registration.status_code == 200
    assert registration.envelope.message == "User id is required"
