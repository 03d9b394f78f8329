"""Tests for configuration and result records."""

from __future__ import annotations

import dataclasses

import pytest

from srigen.models import (
    HashAlgorithm,
    ProcessingResult,
    ResourceType,
    SriConfiguration,
    SriResult,
    SriStatus,
)


def _result(status: SriStatus, url: str = "app.js") -> SriResult:
    return SriResult(
        file_path="index.html",
        resource_url=url,
        integrity_hash="",
        resource_type=ResourceType.SCRIPT,
        is_local=True,
        status=status,
    )


class TestHashAlgorithm:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("sha256", HashAlgorithm.SHA256),
            ("SHA384", HashAlgorithm.SHA384),
            ("sha-512", HashAlgorithm.SHA512),
            (HashAlgorithm.SHA512, HashAlgorithm.SHA512),
            ("whirlpool", HashAlgorithm.SHA384),
            (None, HashAlgorithm.SHA384),
        ],
    )
    def test_parse(self, value, expected):
        assert HashAlgorithm.parse(value) is expected


class TestSriConfiguration:
    def test_defaults(self):
        config = SriConfiguration()
        assert config.hash_algorithm is HashAlgorithm.SHA384
        assert config.include_external_resources is False
        assert config.create_backup is True
        assert config.overwrite_existing is False
        assert config.exclude_patterns == ()

    def test_exclude_patterns_never_none(self):
        config = SriConfiguration(exclude_patterns=None)  # type: ignore[arg-type]
        assert config.exclude_patterns == ()

    def test_exclude_patterns_list_becomes_tuple(self):
        config = SriConfiguration(exclude_patterns=["temp", "debug", ""])  # type: ignore[arg-type]
        assert config.exclude_patterns == ("temp", "debug")

    def test_single_string_pattern(self):
        config = SriConfiguration(exclude_patterns="temp")  # type: ignore[arg-type]
        assert config.exclude_patterns == ("temp",)

    def test_string_algorithm_normalized(self):
        config = SriConfiguration(hash_algorithm="sha512")  # type: ignore[arg-type]
        assert config.hash_algorithm is HashAlgorithm.SHA512

    def test_immutable(self):
        config = SriConfiguration()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.create_backup = False  # type: ignore[misc]

    def test_presets(self):
        assert SriConfiguration.local_only().include_external_resources is False
        assert SriConfiguration.all_resources().include_external_resources is True
        assert SriConfiguration.all_resources().create_backup is True


class TestSriResult:
    def test_succeeded(self):
        assert _result(SriStatus.ADDED).succeeded
        assert _result(SriStatus.UPDATED).succeeded
        assert not _result(SriStatus.SKIPPED).succeeded
        assert not _result(SriStatus.ALREADY_EXISTS).succeeded
        assert not _result(SriStatus.FAILED).succeeded

    def test_failed(self):
        assert _result(SriStatus.FAILED).failed
        assert not _result(SriStatus.SKIPPED).failed

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            _result(SriStatus.ADDED).status = SriStatus.FAILED  # type: ignore[misc]


class TestProcessingResult:
    def test_from_results_counts(self):
        results = [
            _result(SriStatus.ADDED, "a.js"),
            _result(SriStatus.UPDATED, "b.js"),
            _result(SriStatus.FAILED, "c.js"),
            _result(SriStatus.SKIPPED, "d.js"),
            _result(SriStatus.ALREADY_EXISTS, "e.js"),
        ]
        summary = ProcessingResult.from_results(file_count=3, results=results, elapsed=0.5)
        assert summary.total_files_processed == 3
        assert summary.successful_updates == 2
        assert summary.failures == 1
        assert summary.processing_time == 0.5
        assert [r.resource_url for r in summary.results] == ["a.js", "b.js", "c.js", "d.js", "e.js"]

    def test_by_status(self):
        summary = ProcessingResult.from_results(
            1, [_result(SriStatus.SKIPPED, "x"), _result(SriStatus.ADDED, "y")], 0.0
        )
        assert [r.resource_url for r in summary.by_status(SriStatus.SKIPPED)] == ["x"]

    def test_empty(self):
        summary = ProcessingResult.from_results(0, [], 0.0)
        assert summary.successful_updates == 0
        assert summary.failures == 0
        assert summary.results == ()
