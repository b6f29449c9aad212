# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

import argparse
import glob
import logging
import os

import tqdm

from assembler import to_log_line
from engine import DecisionEngine
from image_source import ImageSourceError, open_image
from observation_parser import ParseError
from prompts import OBSERVATION_PROMPTS, get_observation_prompt
from result_log import ResultLog, append_to_json
from settings import configure_logging, load_settings, load_thresholds
from vision import VisionProviderError, build_vision_llm, describe_image


def analyze_file(filepath, llm, engine, prompt):
    """
    Describes one image file and decides on it.

    Returns:
        tuple: (raw model response, Decision)
    """
    with open_image(filepath, cleanup=False) as (image, mime_type):
        raw_text = describe_image(image, llm, prompt=prompt, mime_type=mime_type)
    return raw_text, engine.analyze(raw_text)


def main():
    settings = load_settings()

    parser = argparse.ArgumentParser(
        description="Classify satellite images into events, urgency and research verdicts using a vision LLM."
    )
    parser.add_argument(
        "--input_dir",
        type=str,
        required=True,
        help="Directory containing input images.",
    )
    parser.add_argument(
        "--output_file",
        type=str,
        default=settings.result_log_path,
        help="CSV result log the decisions are appended to.",
    )
    parser.add_argument(
        "--json_output",
        type=str,
        default=None,
        help="Optional JSON file collecting raw responses and decisions, for re-analysis with classify_raw_only.py.",
    )
    parser.add_argument(
        "--prompt_variant",
        type=str,
        choices=list(OBSERVATION_PROMPTS),
        default=settings.prompt_variant,
        help="Observation prompt sent to the vision model.",
    )
    parser.add_argument(
        "--vision_model",
        type=str,
        default=settings.vision_model,
        help="Vision model or deployment name.",
    )
    parser.add_argument(
        "--model_provider",
        type=str,
        default=settings.model_provider,
        help="langchain model provider for the 'chat' client (e.g. openai, google_genai).",
    )
    parser.add_argument(
        "--vision_client",
        type=str,
        choices=["chat", "openai", "azure"],
        default=settings.vision_client,
        help="Client used to call the vision model.",
    )
    parser.add_argument(
        "--thresholds_file",
        type=str,
        default=settings.thresholds_file,
        help="Optional YAML file overriding urgency bands and verdict thresholds.",
    )
    parser.add_argument(
        "--log_file",
        type=str,
        default="labeling.log",
        help="File the run log is written to.",
    )
    args = parser.parse_args()

    configure_logging(args.log_file)

    bands, thresholds = load_thresholds(args.thresholds_file)
    engine = DecisionEngine(bands, thresholds)
    llm = build_vision_llm(args.vision_client, args.vision_model, args.model_provider)
    prompt = get_observation_prompt(args.prompt_variant)
    result_log = ResultLog(args.output_file)

    filepaths = sorted(glob.glob(os.path.join(args.input_dir, "*")))
    if not filepaths:
        logging.info("No images found in the specified input directory.")
        return

    failures = 0
    for filepath in tqdm.tqdm(filepaths):
        filename = os.path.basename(filepath)
        try:
            raw_text, decision = analyze_file(filepath, llm, engine, prompt)
        except (ImageSourceError, VisionProviderError, ParseError) as e:
            failures += 1
            logging.error(f"Failed to analyze {filename}: {e}")
            continue

        result_log.append(to_log_line(decision, filename))
        if args.json_output:
            append_to_json(
                {
                    "filename": filename,
                    "image_path": filepath,
                    "raw_response": raw_text,
                    "analysis": decision.to_dict(),
                },
                args.json_output,
            )
        logging.info(f"{filename}: {decision.event_type} {decision.urgency} {decision.verdict}")

    logging.info(
        f"Done. Analyzed {len(filepaths) - failures}/{len(filepaths)} images, "
        f"results appended to {args.output_file}."
    )


if __name__ == "__main__":
    main()
