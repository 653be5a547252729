"""Tests for file and aggregate fingerprints."""

from __future__ import annotations

import hashlib
from pathlib import Path

import pytest

from depstage.exceptions import HashError
from depstage.hashing import aggregate_fingerprint, file_fingerprint, fingerprint_files


def test_file_fingerprint_is_sha1_of_content(tmp_path: Path) -> None:
    path = tmp_path / "a.jar"
    path.write_bytes(b"A")

    assert file_fingerprint(path) == hashlib.sha1(b"A").hexdigest()


def test_file_fingerprint_reads_large_files_in_chunks(tmp_path: Path) -> None:
    payload = b"x" * (65536 * 3 + 17)
    path = tmp_path / "big.jar"
    path.write_bytes(payload)

    assert file_fingerprint(path) == hashlib.sha1(payload).hexdigest()


def test_file_fingerprint_missing_file_raises_hash_error(tmp_path: Path) -> None:
    with pytest.raises(HashError):
        file_fingerprint(tmp_path / "missing.jar")


def test_aggregate_is_hash_of_sorted_concatenation() -> None:
    first = hashlib.sha1(b"A").hexdigest()
    second = hashlib.sha1(b"B").hexdigest()
    expected = hashlib.sha1("".join(sorted([first, second])).encode("utf-8")).hexdigest()

    assert aggregate_fingerprint([second, first]) == expected


@pytest.mark.parametrize(
    "order",
    [
        pytest.param([0, 1, 2], id="declared"),
        pytest.param([2, 1, 0], id="reversed"),
        pytest.param([1, 2, 0], id="rotated"),
    ],
)
def test_aggregate_is_order_independent(order: list[int]) -> None:
    digests = [hashlib.sha1(content).hexdigest() for content in (b"a", b"b", b"c")]
    baseline = aggregate_fingerprint(digests)

    assert aggregate_fingerprint([digests[i] for i in order]) == baseline


def test_aggregate_changes_when_one_member_changes() -> None:
    before = [hashlib.sha1(b"A").hexdigest(), hashlib.sha1(b"B").hexdigest()]
    after = [hashlib.sha1(b"A").hexdigest(), hashlib.sha1(b"BB").hexdigest()]

    assert aggregate_fingerprint(before) != aggregate_fingerprint(after)


def test_aggregate_counts_duplicate_members() -> None:
    digest = hashlib.sha1(b"A").hexdigest()

    assert aggregate_fingerprint([digest]) != aggregate_fingerprint([digest, digest])


def test_fingerprint_files_with_workers_matches_serial(tmp_path: Path) -> None:
    paths = []
    for index in range(8):
        path = tmp_path / f"dep-{index}.jar"
        path.write_bytes(f"content-{index}".encode())
        paths.append(path)

    serial = fingerprint_files(paths)
    threaded = fingerprint_files(paths, workers=4)

    assert threaded == serial
    assert aggregate_fingerprint(threaded) == aggregate_fingerprint(reversed(serial))
