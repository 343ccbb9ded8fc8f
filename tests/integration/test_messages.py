import pytest


async def _thread(client, settings) -> int:
    r = await client.post(
        f"{settings.api_prefix}/threads/", json={"container_id": 1, "user_id": 1, "title": "chat"}
    )
    return r.json()["id"]


@pytest.mark.asyncio
@pytest.mark.integration
async def test_create_get_and_list_messages(client, settings):
    thread_id = await _thread(client, settings)
    ids = []
    for text in ["one", "two", "three"]:
        r = await client.post(
            f"{settings.api_prefix}/messages/",
            json={"thread_id": thread_id, "user_id": 2, "text": text},
        )
        assert r.status_code == 201, r.text
        ids.append(r.json()["id"])

    got = await client.get(f"{settings.api_prefix}/messages/{ids[1]}")
    assert got.status_code == 200 and got.json()["text"] == "two"

    r = await client.get(
        f"{settings.api_prefix}/threads/{thread_id}/messages", params={"start": 1, "end": 3}
    )
    body = r.json()
    assert body["total"] == 3
    assert [c["id"] for c in body["list"]] == ids[1:]

    r = await client.get(
        f"{settings.api_prefix}/threads/{thread_id}/messages", params={"filter": "t.*e"}
    )
    assert [c["text"] for c in r.json()["list"]] == ["three"]


@pytest.mark.asyncio
@pytest.mark.integration
async def test_message_for_unknown_thread(client, settings):
    r = await client.post(
        f"{settings.api_prefix}/messages/", json={"thread_id": 31337, "user_id": 1, "text": "lost"}
    )
    assert r.status_code == 500
    assert r.json() == {"detail": "internal service error"}


@pytest.mark.asyncio
@pytest.mark.integration
async def test_delete_message(client, settings):
    thread_id = await _thread(client, settings)
    r = await client.post(
        f"{settings.api_prefix}/messages/", json={"thread_id": thread_id, "user_id": 1, "text": "oops"}
    )
    message_id = r.json()["id"]
    for _ in range(2):
        d = await client.delete(f"{settings.api_prefix}/messages/{message_id}")
        assert d.status_code == 200 and d.json()["success"] is True
    r = await client.get(f"{settings.api_prefix}/threads/{thread_id}/messages")
    assert r.json() == {"list": [], "total": 0}
