import pytest


@pytest.mark.asyncio
@pytest.mark.integration
async def test_create_and_get_thread(client, settings):
    r = await client.post(
        f"{settings.api_prefix}/threads/",
        json={"container_id": 1, "user_id": 7, "title": "Welcome", "text": "hi all"},
    )
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["success"] is True
    thread_id = body["id"]

    got = await client.get(f"{settings.api_prefix}/threads/{thread_id}")
    assert got.status_code == 200
    content = got.json()
    assert content["id"] == thread_id
    assert content["user_id"] == 7
    assert content["text"] == "Welcome"
    assert isinstance(content["created_at"], int)

    msgs = await client.get(f"{settings.api_prefix}/threads/{thread_id}/messages")
    assert msgs.status_code == 200
    assert msgs.json()["total"] == 1
    assert msgs.json()["list"][0]["text"] == "hi all"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_list_threads_in_container(client, settings):
    for title in ["rules", "introductions", "off topic"]:
        r = await client.post(
            f"{settings.api_prefix}/threads/",
            json={"container_id": 3, "user_id": 1, "title": title},
        )
        assert r.status_code == 201

    r = await client.get(f"{settings.api_prefix}/containers/3/threads", params={"start": 0, "end": 2})
    assert r.status_code == 200
    body = r.json()
    assert body["total"] == 3
    assert [c["text"] for c in body["list"]] == ["off topic", "introductions"]

    r = await client.get(f"{settings.api_prefix}/containers/3/threads", params={"filter": "intro"})
    assert r.json()["total"] == 1


@pytest.mark.asyncio
@pytest.mark.integration
async def test_list_threads_empty_container(client, settings):
    r = await client.get(f"{settings.api_prefix}/containers/404/threads")
    assert r.status_code == 200
    assert r.json() == {"list": [], "total": 0}


@pytest.mark.asyncio
@pytest.mark.integration
async def test_list_rejects_end_before_start(client, settings):
    r = await client.get(f"{settings.api_prefix}/containers/1/threads", params={"start": 5, "end": 1})
    assert r.status_code == 422
    r = await client.get(f"{settings.api_prefix}/threads/1/messages", params={"start": -1})
    assert r.status_code == 422


@pytest.mark.asyncio
@pytest.mark.integration
async def test_missing_thread_is_internal_error(client, settings):
    r = await client.get(f"{settings.api_prefix}/threads/999")
    assert r.status_code == 500
    assert r.json() == {"detail": "internal service error"}


@pytest.mark.asyncio
@pytest.mark.integration
async def test_delete_thread_twice(client, settings):
    r = await client.post(
        f"{settings.api_prefix}/threads/", json={"container_id": 1, "user_id": 1, "title": "bye"}
    )
    thread_id = r.json()["id"]
    for _ in range(2):
        d = await client.delete(f"{settings.api_prefix}/threads/{thread_id}")
        assert d.status_code == 200
        assert d.json()["success"] is True
    assert (await client.get(f"{settings.api_prefix}/threads/{thread_id}")).status_code == 500


@pytest.mark.asyncio
@pytest.mark.integration
async def test_list_threads_with_uint64_end(client, settings):
    for title in ["a", "b"]:
        await client.post(
            f"{settings.api_prefix}/threads/", json={"container_id": 8, "user_id": 1, "title": title}
        )
    r = await client.get(
        f"{settings.api_prefix}/containers/8/threads", params={"start": 0, "end": 2**64 - 1}
    )
    assert r.status_code == 200, r.text
    assert r.json()["total"] == 2 and len(r.json()["list"]) == 2


@pytest.mark.asyncio
@pytest.mark.integration
@pytest.mark.parametrize(
    "method, path, params",
    [
        ("GET", "/containers/1/threads", {"end": 2**64}),
        ("GET", "/containers/1/threads", {"start": 2**63, "end": 2**63}),
        ("GET", f"/containers/{2**63}/threads", {}),
        ("GET", f"/threads/{2**64}", {}),
        ("GET", "/threads/-1", {}),
        ("GET", "/messages/-5", {}),
        ("DELETE", "/threads/-1", {}),
        ("DELETE", f"/messages/{2**64}", {}),
        ("GET", "/threads/-1/messages", {}),
    ],
)
async def test_out_of_range_inputs_rejected(client, settings, method, path, params):
    r = await client.request(method, f"{settings.api_prefix}{path}", params=params)
    assert r.status_code == 422, r.text


@pytest.mark.asyncio
@pytest.mark.integration
async def test_create_rejects_out_of_range_ids(client, settings):
    r = await client.post(
        f"{settings.api_prefix}/threads/", json={"container_id": 2**64, "user_id": 1, "title": "x"}
    )
    assert r.status_code == 422
    r = await client.post(
        f"{settings.api_prefix}/messages/", json={"thread_id": -1, "user_id": 1, "text": "x"}
    )
    assert r.status_code == 422
