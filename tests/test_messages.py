"""Message sending, inbox / thread assembly and read flags."""
from tests.conftest import API


def send(client, headers, recipient_id, content, **extra):
    resp = client.post(
        f"{API}/messages",
        json={"recipientId": recipient_id, "content": content, **extra},
        headers=headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_hi_scenario(client, login):
    a = login("u1")
    b = login("u2")
    sent = send(client, a, "u2", "hi")
    assert sent["senderId"] == "u1"
    assert sent["isRead"] is False

    resp = client.get(f"{API}/messages", params={"recipientId": "u1"}, headers=b)
    assert resp.status_code == 200
    body = resp.json()
    assert len(body) == 1
    assert body[0]["content"] == "hi"
    assert body[0]["isRead"] is False
    assert body[0]["sender"]["id"] == "u1"
    assert body[0]["recipient"]["id"] == "u2"


def test_thread_is_symmetric_and_excludes_third_parties(client, login):
    a = login("u1")
    b = login("u2")
    c = login("u3")
    send(client, a, "u2", "a->b")
    send(client, b, "u1", "b->a")
    send(client, c, "u1", "c->a")
    send(client, b, "u3", "b->c")

    from_a = client.get(f"{API}/messages", params={"recipientId": "u2"}, headers=a).json()
    from_b = client.get(f"{API}/messages", params={"recipientId": "u1"}, headers=b).json()

    assert {m["content"] for m in from_a} == {"a->b", "b->a"}
    assert {m["id"] for m in from_a} == {m["id"] for m in from_b}


def test_inbox_without_counterpart_is_newest_first(client, login):
    a = login("u1")
    b = login("u2")
    c = login("u3")
    send(client, a, "u2", "first")
    send(client, c, "u1", "second")
    send(client, b, "u3", "not mine")

    inbox = client.get(f"{API}/messages", headers=a).json()
    assert [m["content"] for m in inbox] == ["second", "first"]


def test_self_message_is_accepted(client, login):
    a = login("u1")
    send(client, a, "u1", "note to self")

    inbox = client.get(f"{API}/messages", headers=a).json()
    assert len(inbox) == 1
    assert inbox[0]["sender"]["id"] == inbox[0]["recipient"]["id"] == "u1"


def test_message_about_a_plan(client, login, create_plan):
    a = login("u1")
    b = login("u2")
    plan = create_plan(b)
    msg = send(client, a, "u2", "Joining Tokyo?", travelPlanId=plan["id"])
    assert msg["travelPlanId"] == plan["id"]


def test_send_rejects_unknown_recipient(client, login):
    a = login("u1")
    resp = client.post(
        f"{API}/messages", json={"recipientId": "ghost", "content": "hi"}, headers=a
    )
    assert resp.status_code == 400
    assert resp.json()["message"] == "Recipient not found"


def test_send_rejects_blank_content(client, login):
    a = login("u1")
    login("u2")
    resp = client.post(
        f"{API}/messages", json={"recipientId": "u2", "content": "   "}, headers=a
    )
    assert resp.status_code == 400
    assert resp.json()["errors"][0]["field"] == "content"


def test_send_ignores_server_assigned_fields(client, login):
    a = login("u1")
    login("u2")
    resp = client.post(
        f"{API}/messages",
        json={
            "id": "forged",
            "senderId": "u2",
            "sender_id": "u2",
            "isRead": True,
            "recipientId": "u2",
            "content": "hi",
        },
        headers=a,
    )
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["id"] != "forged"
    assert body["senderId"] == "u1"
    assert body["isRead"] is False


def test_message_bodies_use_camel_case(client, login):
    a = login("u1")
    login("u2")
    resp = client.post(
        f"{API}/messages", json={"recipientId": "u2", "content": "hi"}, headers=a
    )
    assert resp.status_code == 201
    assert set(resp.json()) == {
        "id",
        "senderId",
        "recipientId",
        "travelPlanId",
        "content",
        "isRead",
        "createdAt",
    }

    thread = client.get(f"{API}/messages", params={"recipientId": "u2"}, headers=a)
    assert {"sender", "recipient", "isRead"} <= set(thread.json()[0])
    assert "firstName" in thread.json()[0]["sender"]


def test_mark_read_is_idempotent(client, login):
    a = login("u1")
    b = login("u2")
    msg = send(client, a, "u2", "hi")

    for _ in range(2):
        resp = client.put(f"{API}/messages/{msg['id']}/read", headers=b)
        assert resp.status_code == 200
        assert resp.json() == {"message": "Message marked as read"}

    thread = client.get(f"{API}/messages", params={"recipientId": "u1"}, headers=b).json()
    assert thread[0]["isRead"] is True


def test_mark_read_missing_message_is_404(client, login):
    a = login("u1")
    assert client.put(f"{API}/messages/nope/read", headers=a).status_code == 404
