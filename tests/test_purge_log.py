from datetime import datetime

from ava_cloudflare.models.purge import PurgeResult
from ava_cloudflare.utils.purge_log import append_entry, format_entry

WHEN = datetime(2024, 5, 6, 7, 8, 9)


def test_format_success():
    result = PurgeResult(success=True, message="Cloudflare cache purged successfully")
    assert format_entry(result, WHEN) == "[2024-05-06 07:08:09] SUCCESS: Cloudflare cache purged successfully\n"


def test_format_error():
    result = PurgeResult(success=False, message="transport error: timed out")
    assert format_entry(result, WHEN) == "[2024-05-06 07:08:09] ERROR: transport error: timed out\n"


def test_append_creates_directory(tmp_path):
    log_file = tmp_path / "storage" / "logs" / "cloudflare.log"

    append_entry(log_file, PurgeResult(success=True, message="one"), WHEN)
    append_entry(log_file, PurgeResult(success=False, message="two"), WHEN)

    assert log_file.read_text(encoding="utf-8").splitlines() == [
        "[2024-05-06 07:08:09] SUCCESS: one",
        "[2024-05-06 07:08:09] ERROR: two",
    ]
