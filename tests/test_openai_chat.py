"""
Tests for the chat completions client and chain-of-thought request builder
"""

import asyncio
from unittest.mock import patch

import pytest
import requests

from config import Settings
from models.ApiMessage import ApiMessage
from services.chain_of_thought import COT_INSTRUCTION, COT_SYSTEM_PROMPT
from services.openai_chat import OpenAIChatAPI
from tests.conftest import completion_payload, make_response
from utils.exceptions import ReadError, RemoteError, TransportError


def sent_payload(mock_post):
    return mock_post.call_args.kwargs["json"]


class TestBuildRequest:

    def test_defaults(self, api):
        request = api.build_request([ApiMessage(role="user", content="hi")])
        assert request.model == "gpt-4o"
        assert request.temperature == 0.7
        assert request.max_tokens == 1000
        assert request.system_message_count() == 0

    def test_cot_disabled_leaves_messages_untouched(self, api):
        messages = [ApiMessage(role="system", content="Be concise."), ApiMessage(role="user", content="q")]
        request = api.build_request(messages)
        assert request.messages == messages

    def test_cot_with_existing_system_message(self, api):
        messages = [ApiMessage(role="system", content="Be concise."), ApiMessage(role="user", content="q")]
        request = api.build_request(messages, enable_cot=True)
        assert request.system_message_count() == 1
        assert request.messages[0].content == "Be concise. " + COT_INSTRUCTION

    def test_overrides(self, api):
        request = api.build_request(
            [ApiMessage(role="user", content="q")], model="gpt-4o-mini", temperature=0.0, max_tokens=10
        )
        assert (request.model, request.temperature, request.max_tokens) == ("gpt-4o-mini", 0.0, 10)


class TestChatCompletion:

    @patch("services.openai_chat.requests.post")
    def test_posts_json_with_bearer_auth(self, mock_post, api):
        mock_post.return_value = make_response(json_data=completion_payload("plain"))
        response = asyncio.run(api.chat_completion([ApiMessage(role="user", content="hi")]))

        assert response.first_content() == "plain"
        assert mock_post.call_args.args[0] == "https://api.openai.com/v1/chat/completions"
        headers = mock_post.call_args.kwargs["headers"]
        assert headers["Authorization"] == "Bearer sk-injected"
        assert headers["Content-Type"] == "application/json"
        assert sent_payload(mock_post) == {
            "model": "gpt-4o",
            "messages": [{"role": "user", "content": "hi"}],
            "temperature": 0.7,
            "max_tokens": 1000,
        }

    @patch("services.openai_chat.requests.post")
    def test_per_call_api_key(self, mock_post, api):
        mock_post.return_value = make_response(json_data=completion_payload())
        asyncio.run(api.chat_completion([ApiMessage(role="user", content="hi")], api_key="sk-other"))
        assert mock_post.call_args.kwargs["headers"]["Authorization"] == "Bearer sk-other"

    @patch("services.openai_chat.requests.post")
    def test_non_2xx_raises_remote_error(self, mock_post, api):
        mock_post.return_value = make_response(
            status_code=401, reason="Unauthorized", json_data={"error": {"message": "bad key"}}
        )
        with pytest.raises(RemoteError) as exc_info:
            asyncio.run(api.chat_completion([ApiMessage(role="user", content="hi")]))
        assert exc_info.value.status_code == 401
        assert exc_info.value.error_body == {"error": {"message": "bad key"}}
        assert "401" in str(exc_info.value)

    @patch("services.openai_chat.requests.post")
    def test_unparseable_error_body_is_empty(self, mock_post, api):
        mock_post.return_value = make_response(status_code=502, reason="Bad Gateway", json_data=ValueError("html"))
        with pytest.raises(RemoteError) as exc_info:
            asyncio.run(api.chat_completion([ApiMessage(role="user", content="hi")]))
        assert exc_info.value.error_body == {}

    @patch("services.openai_chat.requests.post")
    def test_connection_failure_raises_transport_error(self, mock_post, api):
        mock_post.side_effect = requests.ConnectionError("refused")
        with pytest.raises(TransportError):
            asyncio.run(api.chat_completion([ApiMessage(role="user", content="hi")]))

    def test_settings_supply_defaults(self):
        settings = Settings(api_key="sk-env", base_url="https://proxy.local/v1/", model="gpt-4.1")
        api = OpenAIChatAPI(settings=settings)
        assert api.api_key == "sk-env"
        assert api.completions_url == "https://proxy.local/v1/chat/completions"
        assert api.model_name == "gpt-4.1"


class TestResponseText:

    @patch("services.openai_chat.requests.post")
    def test_missing_content_is_empty_string(self, mock_post, api):
        payload = completion_payload()
        payload["choices"][0]["message"]["content"] = None
        mock_post.return_value = make_response(json_data=payload)
        assert asyncio.run(api.get_response_text([ApiMessage(role="user", content="hi")])) == ""

    @patch("services.openai_chat.requests.post")
    def test_no_choices_is_empty_string(self, mock_post, api):
        mock_post.return_value = make_response(json_data={"choices": []})
        assert asyncio.run(api.get_response_text([ApiMessage(role="user", content="hi")])) == ""


class TestChainOfThoughtResponse:

    @patch("services.openai_chat.requests.post")
    def test_injects_directive_and_splits(self, mock_post, api):
        mock_post.return_value = make_response(json_data=completion_payload("Thinking: 2+2\nAnswer: 4"))
        reply = asyncio.run(api.get_chain_of_thought_response([ApiMessage(role="user", content="2+2?")]))

        assert (reply.thinking, reply.answer) == ("2+2", "4")
        messages = sent_payload(mock_post)["messages"]
        assert messages[0] == {"role": "system", "content": COT_SYSTEM_PROMPT}
        assert messages[1] == {"role": "user", "content": "2+2?"}

    @patch("services.openai_chat.requests.post")
    def test_cot_cannot_be_disabled(self, mock_post, api):
        mock_post.return_value = make_response(json_data=completion_payload())
        asyncio.run(api.get_chain_of_thought_response([ApiMessage(role="user", content="q")], enable_cot=False))
        assert sent_payload(mock_post)["messages"][0]["role"] == "system"

    @patch("services.openai_chat.requests.post")
    def test_remote_error_propagates(self, mock_post, api):
        mock_post.return_value = make_response(status_code=500, reason="Server Error", json_data={})
        with pytest.raises(RemoteError):
            asyncio.run(api.get_chain_of_thought_response([ApiMessage(role="user", content="q")]))


class TestUploadFiles:

    @patch("services.openai_chat.requests.post")
    def test_multipart_upload(self, mock_post, api, png_blob):
        mock_post.return_value = make_response(json_data={"id": "file-1", "object": "file"})
        result = asyncio.run(api.upload_files([png_blob]))

        assert result == {"id": "file-1", "object": "file"}
        assert mock_post.call_args.args[0] == "https://api.openai.com/v1/files"
        assert mock_post.call_args.kwargs["headers"] == {"Authorization": "Bearer sk-injected"}
        name, content, mime = mock_post.call_args.kwargs["files"][0][1]
        assert (name, mime) == ("pixel.png", "image/png")
        assert content == png_blob.data

    def test_unreadable_file_raises_read_error(self, api, tmp_path):
        from models.FileBlob import FileBlob

        with pytest.raises(ReadError):
            asyncio.run(api.upload_files([FileBlob(path=tmp_path / "nope.png")]))

    def test_undecodable_file_raises_read_error(self, api):
        from models.FileBlob import FileBlob

        blob = FileBlob(name="bad.png", data=b"\x00")
        with patch.object(FileBlob, "read", side_effect=ValueError("corrupt")):
            with pytest.raises(ReadError) as exc_info:
                asyncio.run(api.upload_files([blob]))
        assert isinstance(exc_info.value.cause, ValueError)
