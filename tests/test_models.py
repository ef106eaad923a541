"""
Tests for DeduplicationParams defaults/validation and the small data models.
"""
import pytest
from dedupr.core.errors import ConfigError
from dedupr.core.models import DeduplicationParams, FileEntry, HashResult, RunStats


class TestDeduplicationParams:

    def test_defaults(self):
        params = DeduplicationParams(folders=["/tmp"])

        assert params.parallel == 5
        assert params.hash_size == 2048
        assert params.sample_size_bytes == 2048 * 1024
        assert params.hash_algorithm == "sha256"
        assert params.output == "dedupr.json"
        assert params.extensions is None
        assert params.delete is False

    def test_zero_and_none_mean_default(self):
        params = DeduplicationParams(folders=["/tmp"], parallel=0, hash_size=None, hash_algorithm="")
        assert params.parallel == 5
        assert params.hash_size == 2048
        assert params.hash_algorithm == "sha256"

    @pytest.mark.parametrize("field, value", [("parallel", -1), ("hash_size", -5)])
    def test_negative_values_are_rejected(self, field, value):
        with pytest.raises(ConfigError):
            DeduplicationParams(folders=["/tmp"], **{field: value})

    def test_algorithm_is_lowercased(self):
        assert DeduplicationParams(hash_algorithm="SHA512").hash_algorithm == "sha512"

    def test_extensions_are_normalized(self):
        params = DeduplicationParams(extensions=[".JPG", "png ", "", "."])
        assert params.extensions == ["jpg", "png"]

    def test_star_disables_extension_filter(self):
        assert DeduplicationParams(extensions=["jpg", "*"]).extensions is None

    def test_folders_are_strings(self, tmp_path):
        params = DeduplicationParams(folders=[tmp_path])
        assert params.folders == [str(tmp_path)]

    def test_describe_lists_set_options(self):
        text = DeduplicationParams(folders=["/a"], delete=True).describe()
        assert "delete: True" in text
        assert "reverse" not in text


class TestModels:

    def test_file_entry_is_immutable(self):
        entry = FileEntry(path="/a/b.txt", size=3)
        assert entry.name == "b.txt"
        with pytest.raises(AttributeError):
            entry.size = 4

    def test_hash_result_ok(self):
        assert HashResult(path="/a", size=1, digest="abc").ok
        assert not HashResult(path="/a", size=1, error="boom").ok

    def test_run_stats_summary(self):
        stats = RunStats(distinct_files=3, duplicates=2, reclaimable_bytes=2048, total_time=1.5)
        assert stats.summary() == "Found 3 distinct files, 2 duplicates (2.00KB) in 1.500 seconds"
