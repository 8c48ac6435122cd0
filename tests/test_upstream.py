from gemini_proxy.models import GenerateContentRequest
from gemini_proxy.upstream import UpstreamResult


def test_image_edit_payload_shape():
    req = GenerateContentRequest.image_edit(prompt="add a hat", base64_image="AAAA")
    assert req.to_json() == {
        "contents": [
            {
                "parts": [
                    {"text": "add a hat"},
                    {"inlineData": {"mimeType": "image/jpeg", "data": "AAAA"}},
                ]
            }
        ],
        "generationConfig": {"responseModalities": ["IMAGE"]},
    }


def test_first_inline_image_skips_text_parts():
    res = UpstreamResult(
        status_code=200,
        body={
            "candidates": [
                {
                    "content": {
                        "parts": [
                            {"text": "first"},
                            {"inlineData": {"mimeType": "image/png", "data": "ONE"}},
                            {"inlineData": {"mimeType": "image/png", "data": "TWO"}},
                        ]
                    }
                }
            ]
        },
    )
    assert res.ok
    assert res.error is None
    assert res.first_inline_image() == "ONE"


def test_first_inline_image_only_reads_first_candidate():
    res = UpstreamResult(
        status_code=200,
        body={
            "candidates": [
                {"content": {"parts": [{"text": "nothing"}]}},
                {"content": {"parts": [{"inlineData": {"data": "LATER"}}]}},
            ]
        },
    )
    assert res.first_inline_image() is None


def test_first_inline_image_handles_odd_shapes():
    for body in (None, [], {}, {"candidates": []}, {"candidates": [{}]}, {"candidates": [{"content": {"parts": "x"}}]}):
        assert UpstreamResult(status_code=200, body=body).first_inline_image() is None


def test_error_accessors():
    res = UpstreamResult(status_code=429, body={"error": {"code": 429, "message": "slow down"}})
    assert not res.ok
    assert res.error == {"code": 429, "message": "slow down"}
    assert res.error_message == "slow down"

    res = UpstreamResult(status_code=500, body=None)
    assert res.error is None
    assert res.error_message is None

    res = UpstreamResult(status_code=400, body={"error": "plain text"})
    assert res.error_message == "plain text"
