from unittest import mock

import requests

from client.contact_form import (
    MSG_FAILED,
    MSG_FILL_ALL,
    MSG_NETWORK,
    MSG_SENT,
    ContactFormClient,
    ContactFormState,
)


def make_client(response=None, error=None):
    session = mock.Mock()
    if error is not None:
        session.post.side_effect = error
    else:
        session.post.return_value = response
    return ContactFormClient("http://site.test/", session=session, on_error=lambda e: None), session


def response(status, payload):
    res = mock.Mock()
    res.ok = 200 <= status < 300
    res.json.return_value = payload
    return res


def test_blank_fields_are_not_sent():
    client, session = make_client()
    state = ContactFormState(name="Ada", email="   ", message="hi")

    outcome = client.submit(state)

    assert outcome.message == MSG_FILL_ALL
    assert not outcome.sent
    session.post.assert_not_called()
    assert state.email == "   "


def test_success_posts_trimmed_values_and_resets():
    client, session = make_client(response(200, {"ok": True, "message": "Message received (demo)"}))
    state = ContactFormState(name=" Ada ", email="a@x.com", message=" hi ")

    outcome = client.submit(state)

    session.post.assert_called_once_with(
        "http://site.test/api/contact",
        json={"name": "Ada", "email": "a@x.com", "message": "hi"},
        timeout=10,
    )
    assert outcome.sent
    assert outcome.message == "Message received (demo)"
    assert state == ContactFormState()


def test_success_without_message_uses_default():
    res = response(200, None)
    res.json.side_effect = ValueError()
    client, _ = make_client(res)
    assert client.submit(ContactFormState("Ada", "a@x.com", "hi")).message == MSG_SENT


def test_http_failure_keeps_values():
    client, _ = make_client(response(400, {"message": "Missing fields"}))
    state = ContactFormState("Ada", "a@x.com", "hi")

    outcome = client.submit(state)

    assert outcome.message == "Missing fields"
    assert not outcome.sent
    assert state.message == "hi"


def test_http_failure_without_body():
    client, _ = make_client(response(500, []))
    assert client.submit(ContactFormState("Ada", "a@x.com", "hi")).message == MSG_FAILED


def test_network_error_keeps_values():
    client, _ = make_client(error=requests.ConnectionError("offline"))
    state = ContactFormState("Ada", "a@x.com", "hi")

    outcome = client.submit(state)

    assert outcome.message == MSG_NETWORK
    assert state.name == "Ada"


def test_against_flask_app(client, log_file):
    """Le client parle au vrai endpoint via le test client Flask"""
    flask_client = client

    def post(url, json, timeout):
        res = flask_client.post(url.replace("http://site.test", ""), json=json)
        return response(res.status_code, res.get_json())

    session = mock.Mock()
    session.post.side_effect = post
    form_client = ContactFormClient("http://site.test", session=session)

    outcome = form_client.submit(ContactFormState("Ada", "a@x.com", "hi"))
    assert outcome.sent
    assert outcome.message == "Message received (demo)"
    assert log_file.exists()
