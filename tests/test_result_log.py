"""
Tests for the append-only CSV result log and the JSON record file.
"""

import json
import threading

from assembler import LOG_HEADER
from result_log import ResultLog, append_to_json


def test_creates_file_with_header(tmp_path):
    path = tmp_path / "logs" / "results.csv"
    log = ResultLog(path)

    log.append("a.png,flood,80,5.0,WORTH_RESEARCH,x")
    log.append("b.png,unknown,0,0.0,NOT_WORTH_RESEARCH,")

    assert path.read_text().splitlines() == [
        LOG_HEADER,
        "a.png,flood,80,5.0,WORTH_RESEARCH,x",
        "b.png,unknown,0,0.0,NOT_WORTH_RESEARCH,",
    ]


def test_appends_to_existing_file_without_new_header(tmp_path):
    path = tmp_path / "results.csv"
    path.write_text(LOG_HEADER + "\nold.png,fire,10,1.0,NOT_WORTH_RESEARCH,old\n")

    ResultLog(path).append("new.png,fire,90,4.5,WORTH_RESEARCH,new")

    lines = path.read_text().splitlines()
    assert lines.count(LOG_HEADER) == 1
    assert lines[-1] == "new.png,fire,90,4.5,WORTH_RESEARCH,new"


def test_concurrent_appends_do_not_interleave(tmp_path):
    path = tmp_path / "results.csv"
    log = ResultLog(path)
    line = "scene.png,flood,80,5.0,WORTH_RESEARCH," + "s" * 150

    def worker():
        for _ in range(25):
            log.append(line)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    lines = path.read_text().splitlines()
    assert lines[0] == LOG_HEADER
    assert lines[1:] == [line] * 200


def test_append_to_json(tmp_path):
    path = tmp_path / "out" / "records.json"

    append_to_json({"filename": "a.png"}, path)
    append_to_json({"filename": "b.png"}, path)

    assert json.loads(path.read_text()) == [{"filename": "a.png"}, {"filename": "b.png"}]


def test_append_to_json_recovers_from_corrupt_file(tmp_path):
    path = tmp_path / "records.json"
    path.write_text("{not json" + " " * 100)

    append_to_json({"filename": "a.png"}, path)

    assert json.loads(path.read_text()) == [{"filename": "a.png"}]
