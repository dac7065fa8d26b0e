import pytest

from mountinfo.env import Env
from mountinfo.utilities.storage import Storage


@pytest.mark.ci
class TestStorage:
    @staticmethod
    def test_attribute_access():
        data = Storage(quiet="RC_QUIET")
        assert data.quiet == "RC_QUIET"
        data.verbose = "RC_VERBOSE"
        assert data["verbose"] == "RC_VERBOSE"
        del data.verbose
        assert "verbose" not in data

    @staticmethod
    def test_missing_key_is_none():
        assert Storage().nocolor is None

    @staticmethod
    def test_repr():
        assert repr(Storage(a=1)) == "<Storage {'a': 1}>"

    @staticmethod
    def test_env_variable_names():
        assert sorted(Env.envvars.values()) == ["RC_NOCOLOR", "RC_QUIET", "RC_VERBOSE"]
