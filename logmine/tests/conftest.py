"""
Pytest configuration and shared fixtures for LogMine tests
"""

import pytest
from typing import List, Dict

from logmine.config import ClustererConfig
from logmine.services import ClusteringEngine


@pytest.fixture(scope="session")
def test_data_dir(tmp_path_factory):
    """Create temporary test data directory with mock log files"""
    data_dir = tmp_path_factory.mktemp("test_data")

    apache_log = data_dir / "Apache_full.log"
    apache_log.write_text(
        "[Thu Jun 09 06:07:04 2005] [notice] LDAP: Built with OpenLDAP\n"
        "[Thu Jun 09 06:07:05 2005] [error] Factory error creating channel\n"
        "[Thu Jun 09 06:07:19 2005] [notice] Apache/2.0.49 configured\n" * 100
    )

    healthapp_log = data_dir / "HealthApp_full.log"
    healthapp_log.write_text(
        "20171223-22:15:29:606|Step_LSC|30002312|onStandStepChanged 3579\n"
        "20171223-22:15:29:633|Step_StandReportReceiver|30002312|onReceive action\n"
        "20171223-22:15:29:635|Step_StandStepCounter|30002312|flush sensor data\n" * 50
    )

    return data_dir


@pytest.fixture
def sample_logs() -> List[str]:
    """Sample log lines for testing"""
    return [
        "value config A 1",
        "device A 1 is online",
        "value config B 2",
        "device B 2 is online",
        "value config C 3",
        "device C 3 is online",
        "connection closed by 10.0.0.1 port 22",
    ]


@pytest.fixture
def mock_settings() -> Dict:
    """Default settings for testing"""
    return {
        'max_distance': 0.5,
        'min_members': 1,
        'delimiters': ' ',
        'wildcard_marker': '*',
        'verbose': False,
    }


@pytest.fixture
def engine() -> ClusteringEngine:
    """Engine with the default threshold of 0.5"""
    return ClusteringEngine(ClustererConfig(max_distance=0.5))
