"""End-to-end tests for sign-as-read over HTTP."""

import pytest
from fastapi.testclient import TestClient

from readproof.domain.value import ActionType
from readproof.interface.api.app import create_app
from tests.di import build_test_container
from tests.signing import ALICE, BOB, signed_action


@pytest.fixture
def client():
    """Create test client backed by in-memory storage."""
    return TestClient(create_app(build_test_container()))


def sign_read(client, account, thread_id="blog-1"):
    action = signed_action(
        account, ActionType.SIGN_READ, title="On Proofs", thread_id=thread_id
    )
    return client.post("/signatures", json=action.fields(thread_id=thread_id))


class TestSignReadFlow:
    """Sign a thread as read, then list readers and fetch badges."""

    def test_sign_and_list_readers(self, client):
        # Act
        first = sign_read(client, ALICE)
        second = sign_read(client, BOB)

        # Assert
        assert first.status_code == 201
        assert first.json()["display_name"] == "alice.eth"
        assert second.status_code == 201

        readers = client.get("/threads/blog-1/signatures").json()
        assert readers["count"] == 2
        assert {r["identity"] for r in readers["readers"]} == {
            ALICE.address.lower(),
            BOB.address.lower(),
        }

    def test_resigning_keeps_one_receipt(self, client):
        sign_read(client, ALICE)
        sign_read(client, ALICE)

        readers = client.get("/threads/blog-1/signatures").json()

        assert readers["count"] == 1

    def test_badge_record_lookup_is_case_insensitive(self, client):
        signed = sign_read(client, ALICE).json()

        shouted = "0x" + ALICE.address[2:].upper()

        response = client.get(f"/threads/blog-1/signatures/{shouted}")

        assert response.status_code == 200
        assert response.json()["signature"] == signed["signature"]
        assert response.json()["identity"] == ALICE.address.lower()

    def test_badge_record_carries_thread_metadata(self, client):
        sign_read(client, ALICE)

        response = client.get(
            f"/threads/blog-1/signatures/{ALICE.address}",
            params={"title": "On Reading", "date": "2024-03-01"},
        )

        assert response.status_code == 200
        assert response.json()["thread_title"] == "On Reading"
        assert response.json()["thread_date"] == "2024-03-01"
        assert response.json()["display_name"] == "alice.eth"

    def test_badge_record_for_unsigned_reader(self, client):
        response = client.get(f"/threads/blog-1/signatures/{BOB.address}")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "read_receipt_not_found"
