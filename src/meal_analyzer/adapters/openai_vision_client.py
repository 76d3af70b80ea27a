"""Meal photo extraction through the OpenAI Responses API."""

import json
import logging
from dataclasses import dataclass

from openai import AsyncOpenAI

from meal_analyzer.services.analysis import VisionClient

_logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTIONS = (
    "You are a nutrition expert. Estimate portions from the photo and answer "
    "only with data matching the provided JSON schema."
)


class VisionExtractionError(RuntimeError):
    """Raised when the model returns no usable structured output."""


@dataclass
class OpenAIVisionClient(VisionClient):
    """Structured-output vision client for meal photos."""

    client: AsyncOpenAI
    image_detail: str = "high"

    @classmethod
    def create(cls, api_key: str) -> "OpenAIVisionClient":
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def extract(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        image_data_url: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        """Send the photo with the meal schema and decode the JSON answer."""
        options: dict[str, object] = {"store": store}
        if reasoning_effort:
            options["reasoning"] = {"effort": reasoning_effort}

        response = await self.client.responses.create(
            model=model,
            instructions=SYSTEM_INSTRUCTIONS,
            input=[self._user_message(prompt, image_data_url)],
            text={
                "format": {
                    "type": "json_schema",
                    "name": "meal_extract",
                    "strict": True,
                    "schema": schema,
                }
            },
            **options,
        )
        if not response.output_text:
            raise VisionExtractionError("Vision model returned an empty response")
        try:
            payload = json.loads(response.output_text)
        except json.JSONDecodeError as exc:
            raise VisionExtractionError("Vision model returned invalid JSON") from exc
        _logger.debug("Vision extraction finished with model %s", model)
        return payload

    async def close(self) -> None:
        await self.client.close()

    def _user_message(self, prompt: str, image_data_url: str) -> dict[str, object]:
        return {
            "role": "user",
            "content": [
                {"type": "input_text", "text": prompt},
                {
                    "type": "input_image",
                    "image_url": image_data_url,
                    "detail": self.image_detail,
                },
            ],
        }
