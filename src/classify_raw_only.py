# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

import argparse
import json
import logging
import os

from tqdm import tqdm

from assembler import to_log_line
from engine import DecisionEngine
from observation_parser import ParseError
from result_log import ResultLog
from settings import configure_logging, load_environment, load_thresholds


def reanalyze_records(records, engine, result_log=None):
    """
    Runs the decision engine again on stored vision model responses.

    Args:
        records (list of dict): Records holding a 'raw_response' and an 'image_path' or 'filename'.
        engine (DecisionEngine): The configured engine.
        result_log (ResultLog): Optional log each decision is appended to.
    Returns:
        list of dict: The records with 'analysis' replaced, or 'error' set when parsing failed.
    """
    results = []
    for record in tqdm(records, desc="Re-analyzing responses", total=len(records)):
        record = dict(record)
        filename = record.get("filename") or os.path.basename(record.get("image_path", ""))
        record.pop("error", None)
        try:
            decision = engine.analyze(record.get("raw_response", ""))
        except ParseError as e:
            logging.error(f"Could not parse stored response for {filename}: {e}")
            record.pop("analysis", None)
            record["error"] = str(e)
            results.append(record)
            continue

        record["analysis"] = decision.to_dict()
        if result_log is not None:
            result_log.append(to_log_line(decision, filename))
        results.append(record)
    return results


def main():
    load_environment()

    parser = argparse.ArgumentParser(description="Re-run the decision engine on stored vision model responses")
    parser.add_argument("--responses_path", type=str, required=True,
                        help="JSON file of stored responses, as written by main.py --json_output")
    parser.add_argument("--output_file", type=str, required=True,
                        help="Path to save the re-analyzed records")
    parser.add_argument("--result_log", type=str, default=None,
                        help="Optional CSV result log to append the decisions to")
    parser.add_argument("--thresholds_file", type=str, default=os.environ.get("THRESHOLDS_FILE"),
                        help="Optional YAML file overriding urgency bands and verdict thresholds")
    parser.add_argument("--log_file", type=str, default="labeling.log",
                        help="File the run log is written to")
    args = parser.parse_args()

    configure_logging(args.log_file)

    try:
        with open(args.responses_path, "r") as f:
            records = json.load(f)
        logging.info(f"Loaded {len(records)} responses from {args.responses_path}")
    except (OSError, json.JSONDecodeError) as e:
        logging.error(f"Failed to load responses file: {str(e)}")
        return

    bands, thresholds = load_thresholds(args.thresholds_file)
    result_log = ResultLog(args.result_log) if args.result_log else None
    results = reanalyze_records(records, DecisionEngine(bands, thresholds), result_log)

    with open(args.output_file, "w") as f:
        json.dump(results, f, indent=4)

    failed = sum(1 for record in results if "error" in record)
    logging.info(f"Re-analysis completed ({failed} failed). Results saved to {args.output_file}")


if __name__ == "__main__":
    main()
