import pytest
from pydantic import ValidationError

from swadesh.schemas import ChatRequest, MemoryCreate, MemoryUpdate, UserSettings


def test_chat_request_accepts_camel_and_rejects_empty():
    req = ChatRequest.model_validate({"message": "hi", "personality": "dc-mode"})
    assert req.personality.value == "dc-mode"
    with pytest.raises(ValidationError):
        ChatRequest.model_validate({"message": ""})


def test_chat_request_rejects_unknown_personality():
    with pytest.raises(ValidationError):
        ChatRequest.model_validate({"message": "hi", "personality": "sarcastic"})


def test_memory_create_defaults():
    m = MemoryCreate.model_validate({"content": "Likes chai"})
    assert m.category.value == "general"
    assert m.tags == ""
    assert m.is_pinned is False


def test_memory_create_camel_case():
    m = MemoryCreate.model_validate({"content": "x", "isPinned": True})
    assert m.is_pinned is True


def test_memory_update_requires_a_field():
    with pytest.raises(ValidationError):
        MemoryUpdate.model_validate({})
    assert MemoryUpdate.model_validate({"tags": "food"}).tags == "food"


@pytest.mark.parametrize("field,value", [
    ("ttsSpeed", 0.4), ("ttsSpeed", 2.1),
    ("ttsPitch", 0.4), ("musicVolume", 1.5),
    ("language", "fr"), ("theme", "blue"),
])
def test_user_settings_bounds(field, value):
    with pytest.raises(ValidationError):
        UserSettings.model_validate({field: value})


def test_user_settings_defaults():
    s = UserSettings()
    assert s.personality.value == "friendly"
    assert s.tts_speed == 1.0

