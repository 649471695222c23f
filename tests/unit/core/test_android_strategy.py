"""Unit tests for the ANDROID InnerTube strategy."""

import json

import pytest
import requests

from fasty_transcript.core.exceptions import CaptionParseError, CaptionShapeError, TransportError
from fasty_transcript.core.strategies.android import PLAYER_ENDPOINT, AndroidClientStrategy

from fakes import SRV1_XML, SRV3_XML, FakeResponse, make_session, player_response


def _strategy(session, test_config):
    return AndroidClientStrategy(session=session, config=test_config)


class TestAndroidClientStrategy:

    def test_success_selects_english_track(self, test_config, video_id):
        session = make_session(FakeResponse(200, json.dumps(player_response())), FakeResponse(200, SRV1_XML))

        segments = _strategy(session, test_config).attempt(video_id)

        assert [s.text for s in segments] == ["Hello", "World"]
        player_call, track_call = session.request.call_args_list
        assert player_call.args == ("POST", PLAYER_ENDPOINT)
        assert track_call.args == ("GET", "https://www.youtube.com/api/timedtext?v=x&lang=en")

    def test_request_declares_android_client(self, test_config, video_id):
        session = make_session(FakeResponse(200, json.dumps(player_response())), FakeResponse(200, SRV3_XML))

        _strategy(session, test_config).attempt(video_id)

        kwargs = session.request.call_args_list[0].kwargs
        client = kwargs["json"]["context"]["client"]
        user_agent = test_config.client.android_user_agent
        assert client["clientName"] == "ANDROID"
        assert client["clientVersion"] == test_config.client.android_client_version
        assert client["userAgent"] == user_agent
        assert kwargs["json"]["videoId"] == video_id
        assert kwargs["headers"]["User-Agent"] == user_agent
        # The caption track is fetched with the same identity
        assert session.request.call_args_list[1].kwargs["headers"]["User-Agent"] == user_agent

    def test_android_user_agent_matches_version(self, test_config):
        assert test_config.client.android_user_agent.startswith(
            f"com.google.android.youtube/{test_config.client.android_client_version} "
        )

    def test_http_error(self, test_config, video_id):
        session = make_session(FakeResponse(403, "forbidden"))
        with pytest.raises(TransportError, match="ANDROID API returned 403"):
            _strategy(session, test_config).attempt(video_id)

    def test_network_error(self, test_config, video_id):
        session = make_session(requests.ConnectionError("unreachable"))
        with pytest.raises(TransportError, match="unreachable"):
            _strategy(session, test_config).attempt(video_id)

    def test_invalid_json(self, test_config, video_id):
        session = make_session(FakeResponse(200, "<html>"))
        with pytest.raises(CaptionShapeError, match="not valid JSON"):
            _strategy(session, test_config).attempt(video_id)

    @pytest.mark.parametrize("data,message", [
        ({"playabilityStatus": {"status": "LOGIN_REQUIRED"}}, "no captions in response"),
        ({"captions": {}}, "no captions in response"),
        ({"captions": {"other": 1}}, "no caption tracklist"),
        ({"captions": {"playerCaptionsTracklistRenderer": {"captionTracks": []}}}, "no caption tracks"),
        ({"captions": {"playerCaptionsTracklistRenderer": {"audioTracks": [{}]}}}, "no caption tracks"),
    ])
    def test_missing_shapes(self, test_config, video_id, data, message):
        session = make_session(FakeResponse(200, json.dumps(data)))
        with pytest.raises(CaptionShapeError, match=message):
            _strategy(session, test_config).attempt(video_id)

    def test_empty_parse_is_failure(self, test_config, video_id):
        session = make_session(FakeResponse(200, json.dumps(player_response())), FakeResponse(200, "<transcript/>"))
        with pytest.raises(CaptionParseError):
            _strategy(session, test_config).attempt(video_id)
