# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

from langchain.chat_models import init_chat_model
from langchain_core.messages import HumanMessage
from PIL import Image

from llms.llm_abc import VisionLLM
from llms.utils import clean_output_text, to_data_url


class ChatVLLM(VisionLLM):
    """Vision model behind any langchain chat provider (openai, google_genai, ...)."""

    def __init__(self, model: str = "gpt-4o-mini", model_provider: str = "openai", llm=None):
        self.model = model
        self.llm = llm or init_chat_model(model, model_provider=model_provider, temperature=0)

    def call_vision_llm(self, image: Image.Image, prompt: str, mime_type: str = "image/png") -> str:
        message = HumanMessage(
            content=[
                {"type": "text", "text": prompt},
                {
                    "type": "image_url",
                    "image_url": {"url": to_data_url(image, mime_type)},
                },
            ]
        )
        response = self.llm.invoke([message])
        return clean_output_text(response.content)
