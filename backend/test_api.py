import asyncio

import pytest
from fastapi.testclient import TestClient

from copyspark.errors import InvocationError
from copyspark.inference import get_model_invoker
from copyspark.main import app


@pytest.fixture
def invoker(stub_invoker):
    stub = stub_invoker(reply={"content": "Introducing...", "hashtags": ["#EcoFriendly"]})
    app.dependency_overrides[get_model_invoker] = lambda: stub
    yield stub
    app.dependency_overrides.clear()


@pytest.fixture
def client(invoker):
    return TestClient(app)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_options_lists_dashboard_choices(client):
    body = client.get("/options").json()

    assert body["tones"][0] == "Professional"
    assert "Non-binary" in body["genders"]


def test_social_media_success_folds_tone_and_language(client, invoker):
    resp = client.post("/social-media", json={
        "copy": "Announcing our new eco-friendly water bottle",
        "tone": "Witty",
    })

    assert resp.status_code == 200
    assert resp.json() == {
        "status": "success",
        "result": {"content": "Introducing...", "hashtags": ["#EcoFriendly"]},
    }
    prompt = invoker.calls[0][0]
    assert "Tone: Witty. Language: English. Content: Announcing our new eco-friendly water bottle" in prompt


def test_short_copy_rejected_before_flow(client, invoker):
    resp = client.post("/social-media", json={"copy": "too short"})

    assert resp.status_code == 422
    body = resp.json()
    assert body["code"] == "INVALID_INPUT"
    assert body["details"]["errors"][0]["path"] == "copy"
    assert invoker.calls == []


def test_ad_copy_coerces_variation_count(client, invoker):
    invoker.reply = {"adCopyVariations": [{"copy": "Get fit.", "explanation": "AIDA: ..."}]}

    resp = client.post("/ad-copy", json={
        "productName": "FlexBand Pro",
        "productDescription": "A resistance band set for home workouts.",
        "targetAudience": {"ageRange": "25-35", "location": "USA", "interests": "fitness"},
        "numberOfVariations": "3",
        "tone": "Bold",
        "language": "Spanish",
    })

    assert resp.status_code == 200
    assert resp.json()["result"]["adCopyVariations"][0]["copy"] == "Get fit."
    prompt = invoker.calls[0][0]
    assert "generate 3 ad copy variations" in prompt
    assert "Style: Bold. Language: Spanish. Description: A resistance band set" in prompt
    assert "- Gender: All" in prompt


def test_ad_copy_variation_range(client, invoker):
    resp = client.post("/ad-copy", json={
        "productName": "FlexBand Pro",
        "productDescription": "A resistance band set for home workouts.",
        "targetAudience": {"ageRange": "25-35", "location": "USA", "interests": "f"},
        "numberOfVariations": 6,
    })

    assert resp.status_code == 422
    paths = {e["path"] for e in resp.json()["details"]["errors"]}
    assert paths == {"numberOfVariations", "targetAudience.interests"}
    assert invoker.calls == []


def test_seo_blank_keyword_is_dropped(client, invoker):
    invoker.reply = {"keywords": ["a"], "metadata": {"title": "t", "description": "d"}}

    resp = client.post("/seo", json={"content": "x" * 60, "targetKeyword": "  "})

    assert resp.status_code == 200
    assert "Target Keyword" not in invoker.calls[0][0]


def test_seo_content_minimum_is_ten_characters(client, invoker):
    invoker.reply = {"keywords": ["a"], "metadata": {"title": "t", "description": "d"}}

    ok = client.post("/seo", json={"content": "x" * 10})
    assert ok.status_code == 200
    assert len(invoker.calls) == 1

    short = client.post("/seo", json={"content": "x" * 9})
    assert short.status_code == 422
    assert [e["path"] for e in short.json()["details"]["errors"]] == ["content"]
    assert len(invoker.calls) == 1


def test_form_errors_use_dashboard_wording(client, invoker):
    resp = client.post("/ad-copy", json={
        "productDescription": "A resistance band set for home workouts.",
        "targetAudience": {"ageRange": "2", "location": "USA", "interests": "fitness"},
    })

    assert resp.status_code == 422
    messages = {e["path"]: e["message"] for e in resp.json()["details"]["errors"]}
    assert messages == {
        "productName": "Product name is required.",
        "targetAudience.ageRange": "Age range is required (e.g., 25-35).",
    }

    resp = client.post("/social-media", json={"copy": "too short"})
    assert resp.json()["details"]["errors"][0]["message"] == "Content must be at least 10 characters."


def test_other_form_errors_keep_validator_message(client, invoker):
    resp = client.post("/ad-copy", json={
        "productName": "FlexBand Pro",
        "productDescription": "A resistance band set for home workouts.",
        "targetAudience": {"ageRange": "25-35", "location": "USA", "interests": "fitness"},
        "numberOfVariations": 6,
    })

    error = resp.json()["details"]["errors"][0]
    assert error["path"] == "numberOfVariations"
    assert error["kind"] == "less_than_equal"
    assert "5" in error["message"]


def test_model_output_mismatch_is_502(client, invoker):
    invoker.reply = {}

    resp = client.post("/social-media", json={"copy": "Announcing our new bottle"})

    assert resp.status_code == 502
    assert resp.json()["code"] == "INVALID_MODEL_OUTPUT"


def test_invocation_failure_is_502(client, invoker):
    invoker.error = InvocationError("model service unreachable")

    resp = client.post("/social-media", json={"copy": "Announcing our new bottle"})

    assert resp.status_code == 502
    assert resp.json()["code"] == "INVOCATION_ERROR"


def test_invocation_timeout_is_504(client, invoker):
    invoker.error = asyncio.TimeoutError()

    resp = client.post("/social-media", json={"copy": "Announcing our new bottle"})

    assert resp.status_code == 504
    assert resp.json()["code"] == "INVOCATION_ERROR"
