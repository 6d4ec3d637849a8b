from __future__ import annotations

import logging
from pathlib import Path

import pytest

from riprocess import Config

IMAGE_NUMBERS = range(3521, 3528)

TIMESTAMP_FILES = {
    "170621_202838.eif": "73718.100000\n73719.700000\n",
    "170621_202939.eif": "73779.899441\n73781.419326\n",
    "170621_203040.eif": "73840.399224\n73842.018970\n",
    "170621_203141.eif": "73901.250000\n",
}

START_TIMES = [332978.669, 333039.279]

EXPECTED_TIMESTAMPS = [332979.899441, 332981.419326, 333040.399224, 333042.018970]


@pytest.fixture()
def image_dir(tmp_path: Path) -> Path:
    """Seven images DSC03521-DSC03527 plus files that must be ignored."""
    directory = tmp_path / "images"
    directory.mkdir()
    for number in IMAGE_NUMBERS:
        (directory / f"DSC{number:05d}.JPG").write_bytes(b"")
    for name in ("notes.txt", "DSC0352.JPG", "DSC035220.JPG", "IMG03522.JPG", "DSC03522.JPG.bak"):
        (directory / name).write_bytes(b"")
    return directory


@pytest.fixture()
def timestamp_dir(tmp_path: Path) -> Path:
    """Four ``.eif`` files plus files that must be ignored."""
    directory = tmp_path / "timestamps"
    directory.mkdir()
    for name, contents in TIMESTAMP_FILES.items():
        (directory / name).write_text(contents, encoding="utf-8")
    for name in ("170621_202838.txt", "readme.eif", "1706_202838.eif"):
        (directory / name).write_text("not a timestamp\n", encoding="utf-8")
    return directory


@pytest.fixture()
def empty_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "empty"
    directory.mkdir()
    return directory


@pytest.fixture()
def config_file(tmp_path: Path, image_dir: Path, timestamp_dir: Path) -> Path:
    """Configuration selecting four images and two timestamp files."""
    path = tmp_path / "config.toml"
    path.write_text(
        f"""\
[images]
path = "{image_dir.as_posix()}"
first_image_number = 3522
last_image_number = 3525

[timestamps]
path = "{timestamp_dir.as_posix()}"
first_timestamp_file_name = "170621_202939.eif"
last_timestamp_file_name = "170621_203040.eif"

[records]
start_times = [{START_TIMES[0]}, {START_TIMES[1]}]
""",
        encoding="utf-8",
    )
    return path


@pytest.fixture()
def config(config_file: Path) -> Config:
    return Config.from_path(config_file)


@pytest.fixture(autouse=True)
def _restore_package_logger():
    """Undo handlers attached by configure_logging during a test."""
    logger = logging.getLogger("riprocess")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
