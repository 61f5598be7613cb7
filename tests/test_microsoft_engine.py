import threading

import pytest
import requests

from skill.engines.base import TranslationError
from skill.engines.microsoft import MicrosoftTranslator, unwrap_string_envelope


ENVELOPE = (
    '<string xmlns="http://schemas.microsoft.com/2003/10/Serialization/">{}</string>'
)


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200):
        self.text = text
        self.status_code = status_code


class FakeSession:
    def __init__(self, responses: list):
        self.responses = responses
        self.requests = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.requests.append((url, params, headers, timeout))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def _engine(session, **kwargs) -> MicrosoftTranslator:
    return MicrosoftTranslator("https://translator.example/Translate", "key", session, **kwargs)


def test_unwrap_string_envelope():
    assert unwrap_string_envelope(ENVELOPE.format("This is a contract")) == "This is a contract"
    assert unwrap_string_envelope("<string>a &amp; b</string>") == "a & b"
    assert unwrap_string_envelope(ENVELOPE.format("")) == ""


def test_unwrap_string_envelope_rejects_garbage():
    with pytest.raises(TranslationError):
        unwrap_string_envelope("not xml")
    with pytest.raises(TranslationError):
        unwrap_string_envelope("<html>error</html>")


def test_translate_sends_key_and_target():
    session = FakeSession([FakeResponse(ENVELOPE.format("This is a contract in English"))])
    engine = _engine(session, region="westeurope", timeout=5)

    results = engine.translate(["Este es un contrato en Inglés"], None, "en-us")

    assert [r.text for r in results] == ["This is a contract in English"]
    assert results[0].engine == "microsoft"
    url, params, headers, timeout = session.requests[0]
    assert url == "https://translator.example/Translate"
    assert params["to"] == "en-us"
    assert params["text"] == "Este es un contrato en Inglés"
    assert "from" not in params
    assert headers["Ocp-Apim-Subscription-Key"] == "key"
    assert headers["Ocp-Apim-Subscription-Region"] == "westeurope"
    assert timeout == 5


def test_translate_passes_source_language():
    session = FakeSession([FakeResponse(ENVELOPE.format("Hello"))])
    _engine(session).translate(["Hola"], "es", "en-us")
    assert session.requests[0][1]["from"] == "es"


def test_translate_one_call_per_text():
    session = FakeSession(
        [FakeResponse(ENVELOPE.format("one")), FakeResponse(ENVELOPE.format("two"))]
    )
    results = _engine(session).translate(["uno", "dos"], None, "en-us")
    assert [r.text for r in results] == ["one", "two"]
    assert len(session.requests) == 2


def test_translate_http_error_raises():
    session = FakeSession([FakeResponse("quota exceeded", status_code=403)])
    with pytest.raises(TranslationError, match="403"):
        _engine(session).translate(["Hola"], None, "en-us")


def test_translate_transport_error_raises():
    session = FakeSession([requests.ConnectionError("boom")])
    with pytest.raises(TranslationError):
        _engine(session).translate(["Hola"], None, "en-us")


def test_translate_empty_input_makes_no_call():
    session = FakeSession([])
    assert _engine(session).translate([], None, "en-us") == []
    assert session.requests == []


def test_unwrap_string_envelope_rejects_entity_declarations():
    body = (
        '<!DOCTYPE string [<!ENTITY boom "boom">]>'
        "<string>&boom;</string>"
    )
    with pytest.raises(TranslationError):
        unwrap_string_envelope(body)


def test_each_thread_gets_its_own_session():
    engine = MicrosoftTranslator("https://translator.example/Translate", "key")
    seen = []

    def _grab():
        seen.append(engine._session())
        seen.append(engine._session())

    worker = threading.Thread(target=_grab)
    worker.start()
    worker.join()
    main_session = engine._session()

    assert seen[0] is seen[1]
    assert isinstance(main_session, requests.Session)
    assert main_session is not seen[0]
    assert engine._session() is main_session


def test_injected_session_is_used():
    session = FakeSession([FakeResponse(ENVELOPE.format("Hello"))])
    engine = _engine(session)
    assert engine._session() is session
