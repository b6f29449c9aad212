# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

import os

from openai import AzureOpenAI, OpenAI
from PIL import Image

from llms.llm_abc import VisionLLM
from llms.utils import clean_output_text, to_data_url


def init_openai_client(variant: str = "openai") -> OpenAI | AzureOpenAI:
    if variant.lower() == "azure":
        return AzureOpenAI(
            api_version=os.environ.get(
                "AZURE_OPENAI_API_VERSION", "2023-03-15-preview"
            ),
            azure_endpoint=os.environ.get("AZURE_OPENAI_ENDPOINT", ""),
            api_key=os.environ.get("AZURE_OPENAI_API_KEY", ""),
        )
    return OpenAI(api_key=os.environ.get("OPENAI_API_KEY", ""))


class OpenAIClientVLLM(VisionLLM):
    """Vision model called through the openai SDK, against OpenAI or an Azure deployment."""

    def __init__(self, model: str = "gpt-4o-mini", variant: str = "openai", client: OpenAI | AzureOpenAI | None = None):
        self.model = model
        self.client = client or init_openai_client(variant)

    def call_vision_llm(self, image: Image.Image, prompt: str, mime_type: str = "image/png") -> str:
        messages = [
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": prompt},
                    {
                        "type": "image_url",
                        "image_url": {"url": to_data_url(image, mime_type)},
                    },
                ],
            }
        ]
        response = self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            temperature=0,
        )
        return clean_output_text(response.choices[0].message.content)
