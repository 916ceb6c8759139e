"""Tests for uid module."""

import re

from thoughtbox.utils import uid


# UUID v4 pattern: xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx
UUID_PATTERN = re.compile(
    r'^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$',
    re.IGNORECASE
)


class TestGenerateUuid:
    """Tests for generate_uuid function."""

    def test_returns_valid_uuid_v4_format(self):
        """Should match UUID v4 pattern."""
        assert UUID_PATTERN.match(uid.generate_uuid()) is not None

    def test_returns_unique_values(self):
        """Multiple calls should return different values."""
        results = [uid.generate_uuid() for _ in range(100)]
        assert len(set(results)) == 100
