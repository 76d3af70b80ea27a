"""Tests for meal image analysis."""

import asyncio

import pytest
from pydantic import ValidationError

from meal_analyzer.domain.meals import NutritionalBalance
from meal_analyzer.services.analysis import (
    MEAL_SCHEMA,
    VisionImageAnalyzer,
    _to_data_url,
)
from meal_analyzer.services.meal_assessment import FIBER_RECOMMENDATION
from tests.conftest import FakeVisionClient


def _analyzer(client: FakeVisionClient) -> VisionImageAnalyzer:
    return VisionImageAnalyzer(
        client=client, model="gpt-5.2", reasoning_effort="medium", store=False
    )


def test_analyzer_totals_detected_foods() -> None:
    client = FakeVisionClient()

    analysis = asyncio.run(_analyzer(client).analyze(b"\xff\xd8\xffimage"))

    assert analysis.name == "Chicken and rice"
    assert [food.name for food in analysis.detected_foods] == [
        "Grilled Chicken",
        "Brown Rice",
    ]
    assert analysis.total_nutrition.calories == 381
    assert analysis.total_nutrition.protein == 36
    assert analysis.total_nutrition.fiber == pytest.approx(3.5)
    assert analysis.confidence == pytest.approx(0.9)


def test_analyzer_assesses_meal_totals() -> None:
    analysis = asyncio.run(_analyzer(FakeVisionClient()).analyze(b"image"))

    assert analysis.assessment.nutritional_balance is NutritionalBalance.POOR
    assert analysis.assessment.recommendations == [FIBER_RECOMMENDATION]
    assert analysis.assessment.health_score == 80


def test_analyzer_sends_schema_and_data_url() -> None:
    client = FakeVisionClient()

    asyncio.run(_analyzer(client).analyze(b"\x89PNG\r\n\x1a\nrest"))

    assert client.calls[0]["model"] == "gpt-5.2"
    assert str(client.calls[0]["image_data_url"]).startswith("data:image/png;base64,")
    assert MEAL_SCHEMA["required"] == ["meal_name", "foods"]


def test_analyzer_names_meal_from_foods_when_model_omits_it() -> None:
    client = FakeVisionClient()
    client.payload = {**client.payload, "meal_name": None}

    analysis = asyncio.run(_analyzer(client).analyze(b"image"))

    assert analysis.name == "Grilled Chicken, Brown Rice"


def test_analyzer_handles_empty_plate() -> None:
    client = FakeVisionClient(payload={"meal_name": None, "foods": []})

    analysis = asyncio.run(_analyzer(client).analyze(b"image"))

    assert analysis.name == "Unknown Meal"
    assert analysis.detected_foods == []
    assert analysis.total_nutrition.calories == 0
    assert analysis.confidence == 0


def test_analyzer_rejects_negative_nutrition() -> None:
    client = FakeVisionClient(
        payload={
            "meal_name": "Broken",
            "foods": [
                {
                    "name": "Mystery",
                    "confidence": 0.5,
                    "nutrition": {
                        "calories": -10,
                        "protein": 0,
                        "carbs": 0,
                        "fat": 0,
                        "fiber": 0,
                        "sugar": 0,
                        "sodium": 0,
                    },
                }
            ],
        }
    )

    with pytest.raises(ValidationError):
        asyncio.run(_analyzer(client).analyze(b"image"))


def test_to_data_url_detects_webp() -> None:
    data = b"RIFF\x00\x00\x00\x00WEBPrest"

    assert _to_data_url(data).startswith("data:image/webp;base64,")


def test_to_data_url_defaults_to_jpeg() -> None:
    assert _to_data_url(b"unknown").startswith("data:image/jpeg;base64,")
