# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

"""
HTTP front end: one endpoint taking a single image upload.

Usage:
    python src/server.py
    PORT=8080 python src/server.py
"""

import logging
import os

from flask import Flask, jsonify, request

from assembler import to_log_line
from engine import DecisionEngine
from image_source import open_image, save_upload
from prompts import get_observation_prompt
from result_log import ResultLog
from settings import configure_logging, load_settings, load_thresholds
from vision import build_vision_llm, describe_image


def create_app(settings=None, vision_llm=None, engine=None):
    """Create and configure the Flask app."""
    settings = settings or load_settings()
    if engine is None:
        engine = DecisionEngine(*load_thresholds(settings.thresholds_file))
    if vision_llm is None:
        vision_llm = build_vision_llm(
            settings.vision_client, settings.vision_model, settings.model_provider
        )
    prompt = get_observation_prompt(settings.prompt_variant)
    result_log = ResultLog(settings.result_log_path)

    app = Flask(__name__)

    @app.route("/health")
    def health():
        return jsonify({"status": "ok"})

    @app.route("/analyze", methods=["POST"])
    def analyze():
        upload = request.files.get("image")
        if upload is None or not upload.filename:
            return jsonify({"error": "Image upload failed."}), 400

        try:
            temp_path = save_upload(upload, settings.upload_dir)
            with open_image(temp_path) as (image, mime_type):
                raw_text = describe_image(image, vision_llm, prompt=prompt, mime_type=mime_type)
            decision = engine.analyze(raw_text)
            result_log.append(to_log_line(decision, upload.filename))
        except Exception:
            logging.exception(f"Failed to analyze upload {upload.filename}")
            return jsonify({"error": "Failed to analyze image"}), 500

        return jsonify({"analysis": decision.to_dict()})

    return app


def main():
    configure_logging(os.environ.get("SERVER_LOG_FILE", "server.log"))
    settings = load_settings()
    app = create_app(settings)
    logging.info(f"Server is running on port {settings.port}")
    app.run(host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
