import pytest
from django.core.exceptions import ImproperlyConfigured

from library_graphql.server import settings


@pytest.mark.parametrize("value,expected", [("info", "INFO"), (" debug ", "DEBUG"), ("WARNING", "WARNING")])
def test_log_level(value, expected):
    assert settings._log_level(value) == expected


@pytest.mark.parametrize("value", ["verbose", "", "10"])
def test_invalid_log_level(value):
    with pytest.raises(ImproperlyConfigured, match="LIBRARY_GRAPHQL_LOG_LEVEL"):
        settings._log_level(value)
