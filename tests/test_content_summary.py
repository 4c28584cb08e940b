import pytest

from hdfskit.content_summary import ContentSummary


def test_file_summary():
    cs = ContentSummary.from_mapping(
        "/_test/foo.txt",
        {"length": 4, "spaceConsumed": 12, "fileCount": 1, "directoryCount": 0},
    )
    assert cs.name == "/_test/foo.txt"
    assert cs.size == 4
    assert cs.size_after_replication >= 4
    assert cs.file_count == 1
    assert cs.directory_count == 0


def test_directory_summary():
    cs = ContentSummary.from_mapping(
        "/_test/dirforcs", {"fileCount": 2, "directoryCount": 3}
    )
    assert cs.file_count == 2
    assert cs.directory_count == 3


def test_missing_fields_are_zero():
    cs = ContentSummary.from_mapping("/x", {})
    assert (cs.size, cs.file_count, cs.name_quota, cs.space_quota) == (0, 0, 0, 0)


def test_snake_case_keys_accepted():
    cs = ContentSummary.from_mapping(
        "/x", {"space_consumed": 9, "file_count": 5, "space_quota": 100}
    )
    assert cs.size_after_replication == 9
    assert cs.file_count == 5
    assert cs.space_quota == 100


def test_unsigned_quota_reads_as_unset():
    unset = (1 << 64) - 1
    cs = ContentSummary.from_mapping("/x", {"quota": unset, "spaceQuota": unset})
    assert cs.name_quota == -1
    assert cs.space_quota == -1


def test_summary_is_immutable():
    cs = ContentSummary.from_mapping("/x", {"length": 4})
    with pytest.raises(AttributeError):
        cs.size = 5
    assert cs.size == 4