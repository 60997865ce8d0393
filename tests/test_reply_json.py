import pytest

from webhook_chat.errors import WebhookReplyError
from webhook_chat.utils.reply_json import extract_message, first_element


def test_first_element_of_array():
    assert first_element([{"message": "a"}, {"message": "b"}]) == {"message": "a"}


def test_first_element_of_index_keyed_object():
    assert first_element({"0": {"message": "pong"}}) == {"message": "pong"}


@pytest.mark.parametrize("data", [[], {}, {"message": "x"}, "text", 1, None])
def test_first_element_rejects_other_shapes(data):
    with pytest.raises(WebhookReplyError):
        first_element(data)


def test_extract_message():
    assert extract_message([{"message": "**hola**", "extra": 1}]) == "**hola**"


def test_extract_message_stringifies_scalars():
    assert extract_message([{"message": 12}]) == "12"


@pytest.mark.parametrize("head", [{}, {"message": ""}, {"message": None}, {"message": 0}])
def test_extract_message_missing_returns_none(head):
    assert extract_message([head]) is None


@pytest.mark.parametrize("head", ["pong", ["pong"], None])
def test_extract_message_requires_object(head):
    with pytest.raises(WebhookReplyError):
        extract_message([head])
