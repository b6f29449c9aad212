# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

import logging

from llms.llm_abc import VisionLLM
from prompts import get_observation_prompt


class VisionProviderError(RuntimeError):
    """Raised when the vision model fails or answers with nothing."""


def build_vision_llm(vision_client="chat", model="gpt-4o-mini", model_provider="openai") -> VisionLLM:
    """
    Creates the vision model client.

    Args:
        vision_client (str): 'chat' for a langchain chat model, 'openai' or 'azure'
            for the openai SDK.
        model (str): Model or deployment name.
        model_provider (str): langchain provider, only used with 'chat'.
    Returns:
        VisionLLM: The client.
    """
    if vision_client == "chat":
        from llms.chat_llm import ChatVLLM

        return ChatVLLM(model=model, model_provider=model_provider)
    if vision_client in ("openai", "azure"):
        from llms.openai_llm import OpenAIClientVLLM

        return OpenAIClientVLLM(model=model, variant=vision_client)
    raise ValueError(
        f"Unsupported vision client: {vision_client}. Supported clients are 'chat', 'openai' and 'azure'."
    )


def describe_image(image, llm: VisionLLM, prompt=None, mime_type="image/png") -> str:
    """
    Asks the vision model to describe the image as an observation.

    Args:
        image (PIL.Image): The image to analyze.
        llm (VisionLLM): The vision model client.
        prompt (str): The instruction; defaults to the 'intensity' observation prompt.
        mime_type (str): The image's mime type.
    Returns:
        str: The raw model response, expected but not guaranteed to hold a JSON object.
    Raises:
        VisionProviderError: If the call fails or the response is empty.
    """
    prompt = prompt or get_observation_prompt()
    try:
        raw_text = llm.call_vision_llm(image, prompt, mime_type)
    except Exception as e:
        raise VisionProviderError(f"Vision model call failed: {e}") from e

    if not raw_text or not raw_text.strip():
        raise VisionProviderError("Vision model returned an empty response.")
    logging.debug(f"Vision model response: {raw_text}")
    return raw_text.strip()
