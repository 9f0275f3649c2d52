"""Business assistant backed by the Gemini model service.

The assistant never raises to its caller: model errors are logged and turned
into a fixed apology string.
"""

import json
import logging
import os
from typing import Any, Optional, Sequence

import google.generativeai as genai

from lumibiz.domain.entities import Record
from lumibiz.storage.mappers import record_to_document

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_DEEP_MODEL = "gemini-2.5-pro"
CONTEXT_LIMIT = 50

NO_RESPONSE = "No response generated."
CHAT_ERROR = "Sorry, I encountered an error while processing your request. Please try again."
NO_IMAGE_ANALYSIS = "Could not analyze image."
IMAGE_ERROR = "Error analyzing the image."
DEFAULT_IMAGE_PROMPT = "Analyze this image relevant to an LED bulb business."

SYSTEM_INSTRUCTION = """
You are Leon, an expert business consultant for an LED bulb distribution business.
The user speaks Bengali and English. Reply in the language the user asks in, or English by default.
Always introduce yourself as Leon if asked.

Data Context (Recent Transactions): {context}

Key Terms:
- Munafa: Profit
- Lite/Bulb Replace Cost: The cost incurred when replacing a faulty bulb under warranty.
- Sell Price: Price sold to shopkeepers.
"""

DEEP_ANALYSIS_INSTRUCTION = """
Deep analysis is enabled: analyse trends in the data, identify shops with high
replacement rates and suggest pricing strategies.
"""


def build_context(records: Sequence[Record], limit: int = CONTEXT_LIMIT) -> str:
    """Serialize the first `limit` records as the model's data context.

    Callers pass records newest first, so this keeps the most recent ones.
    """
    return json.dumps(
        [record_to_document(record) for record in records[:limit]],
        ensure_ascii=False,
    )


class AssistantClient:
    """Answers questions about recorded sales using a text/image model."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: Optional[str] = None,
        deep_model_name: Optional[str] = None,
        context_limit: int = CONTEXT_LIMIT,
    ):
        """Initialize assistant client.

        Args:
            api_key: Gemini API key. If None, checks GEMINI_API_KEY environment variable
            model_name: Model for regular questions and images. If None, checks
                LUMIBIZ_MODEL, then defaults to gemini-2.0-flash
            deep_model_name: Model for deep analysis. If None, checks
                LUMIBIZ_DEEP_MODEL, then defaults to gemini-2.5-pro
            context_limit: Maximum number of records sent as context
        """
        self.api_key = api_key or os.environ.get("GEMINI_API_KEY")
        self.model_name = model_name or os.environ.get("LUMIBIZ_MODEL", DEFAULT_MODEL)
        self.deep_model_name = deep_model_name or os.environ.get(
            "LUMIBIZ_DEEP_MODEL", DEFAULT_DEEP_MODEL
        )
        self.context_limit = context_limit
        if self.api_key:
            genai.configure(api_key=self.api_key)

    def build_system_instruction(self, records: Sequence[Record], deep_analysis: bool) -> str:
        instruction = SYSTEM_INSTRUCTION.format(
            context=build_context(records, self.context_limit)
        )
        if deep_analysis:
            instruction += DEEP_ANALYSIS_INSTRUCTION
        return instruction

    def _generate(
        self, model_name: str, contents: Any, system_instruction: Optional[str] = None
    ) -> str:
        model = genai.GenerativeModel(model_name, system_instruction=system_instruction)
        response = model.generate_content(contents)
        return (response.text or "").strip()

    def ask(self, query: str, records: Sequence[Record], deep_analysis: bool = False) -> str:
        """Ask a question about the given records.

        Args:
            query: Free-text question
            records: Records available to the user, newest first
            deep_analysis: Use the deep model and ask for a trend analysis

        Returns:
            The model's answer, or a fixed fallback message on failure
        """
        model_name = self.deep_model_name if deep_analysis else self.model_name
        try:
            text = self._generate(
                model_name,
                query,
                system_instruction=self.build_system_instruction(records, deep_analysis),
            )
        except Exception as e:
            logger.error("Gemini API error: %s", e)
            return CHAT_ERROR
        return text or NO_RESPONSE

    def analyze_image(self, image_data: bytes, mime_type: str, prompt: str = "") -> str:
        """Describe an image (e.g. a bulb box or a receipt photo).

        Returns:
            The model's analysis, or a fixed fallback message on failure
        """
        contents = [
            {"mime_type": mime_type, "data": image_data},
            prompt or DEFAULT_IMAGE_PROMPT,
        ]
        try:
            text = self._generate(self.model_name, contents)
        except Exception as e:
            logger.error("Gemini image API error: %s", e)
            return IMAGE_ERROR
        return text or NO_IMAGE_ANALYSIS
