"""
Tests for client construction, credential validation and environment loading
"""

import pytest

from BandwidthAPI.clients import CatapultClient, NumbersClient
from BandwidthAPI.clients.exceptions import APIClientError, ConfigurationError
from BandwidthAPI.config import (
    API_REGISTRY,
    get_api_config,
    load_env_settings,
    validate_credentials
)


class TestCatapultConstruction:
    """Catapult client construction"""

    @pytest.mark.parametrize("field, kwargs", [
        ("user_id", {"user_id": "", "api_token": "token", "api_secret": "secret"}),
        ("api_token", {"user_id": "u-123", "api_token": "", "api_secret": "secret"}),
        ("api_secret", {"user_id": "u-123", "api_token": "token", "api_secret": ""}),
    ])
    def test_empty_credential_is_rejected(self, field, kwargs):
        """Each empty credential raises ConfigurationError naming it"""
        with pytest.raises(ConfigurationError) as exc_info:
            CatapultClient(**kwargs)

        assert exc_info.value.missing_fields == [field]
        assert field in str(exc_info.value)

    def test_none_credentials_are_rejected(self):
        """None counts as missing"""
        with pytest.raises(ConfigurationError) as exc_info:
            CatapultClient(None, None, None)

        assert exc_info.value.missing_fields == ["user_id", "api_token", "api_secret"]

    def test_defaults(self):
        """Endpoint and version default to the public v1 API"""
        client = CatapultClient("u-123", "token", "secret")

        assert client.base_url == "https://api.catapult.inetwork.com"
        assert client.api_version == "v1"
        assert client.get_path_prefix() == "v1"
        assert client.timeout == 30

    def test_overrides(self):
        """Version and endpoint can be overridden"""
        client = CatapultClient("u-123", "token", "secret", api_version="v2",
                                base_url="http://localhost:8080/", timeout=5)

        assert client.base_url == "http://localhost:8080"
        assert client.api_version == "v2"
        assert client.timeout == 5

    def test_invalid_base_url(self):
        """A base URL without http(s) scheme is a configuration error"""
        with pytest.raises(ConfigurationError):
            CatapultClient("u-123", "token", "secret", base_url="ftp://example.com")

    def test_negative_timeout(self):
        with pytest.raises(ConfigurationError):
            CatapultClient("u-123", "token", "secret", timeout=-1)

    def test_zero_timeout_is_not_replaced_by_default(self):
        with pytest.raises(ConfigurationError):
            CatapultClient("u-123", "token", "secret", timeout=0)

    def test_empty_base_url_is_not_replaced_by_default(self):
        """An explicit empty endpoint is rejected instead of falling back"""
        with pytest.raises(ConfigurationError) as exc_info:
            CatapultClient("u-123", "token", "secret", base_url="")

        assert exc_info.value.missing_fields == ["base_url"]

    def test_configuration_error_is_client_error(self):
        """Construction failures share the common base exception"""
        assert issubclass(ConfigurationError, APIClientError)


class TestNumbersConstruction:
    """Numbers client construction"""

    @pytest.mark.parametrize("field, kwargs", [
        ("account_id", {"account_id": "", "username": "user", "password": "pass"}),
        ("username", {"account_id": "9900000", "username": "", "password": "pass"}),
        ("password", {"account_id": "9900000", "username": "user", "password": ""}),
    ])
    def test_empty_credential_is_rejected(self, field, kwargs):
        """Each empty credential raises ConfigurationError naming it"""
        with pytest.raises(ConfigurationError) as exc_info:
            NumbersClient(**kwargs)

        assert exc_info.value.missing_fields == [field]

    def test_defaults(self):
        client = NumbersClient("9900000", "user", "pass")

        assert client.base_url == "https://dashboard.bandwidth.com"
        assert client.get_path_prefix() == "api/accounts/9900000"
        assert client.user_agent == "bandwidth-api-python/v2/numbers"

    @pytest.mark.parametrize("overrides", [{"base_url": ""}, {"timeout": 0}])
    def test_explicit_empty_settings_are_rejected(self, overrides):
        with pytest.raises(ConfigurationError):
            NumbersClient("9900000", "user", "pass", **overrides)

    def test_account_id_is_escaped_in_prefix(self):
        """The account id is a single path segment"""
        client = NumbersClient("acc/1 2", "user", "pass")

        assert client.get_path_prefix() == "api/accounts/acc%2F1%202"


class TestRegistry:
    """API registry helpers"""

    def test_registered_apis(self):
        assert set(API_REGISTRY) == {"Catapult", "Numbers"}

    def test_unknown_api(self):
        with pytest.raises(KeyError):
            get_api_config("Unknown")

    def test_required_credentials_have_env_vars(self):
        """Every required credential can be read by from_env"""
        for api_name in API_REGISTRY:
            config = get_api_config(api_name)
            assert set(config["required_credentials"]) <= set(config["env_vars"])

    def test_validate_credentials(self):
        missing = validate_credentials("Numbers", {"account_id": "1", "username": ""})
        assert missing == ["username", "password"]


class TestEnvironmentLoading:
    """from_env and load_env_settings"""

    def test_catapult_from_env(self, isolated_environ, tmp_path):
        """Credentials, endpoint and version are read from BANDWIDTH_* variables"""
        isolated_environ.update({
            "BANDWIDTH_USER_ID": "u-env",
            "BANDWIDTH_API_TOKEN": "token-env",
            "BANDWIDTH_API_SECRET": "secret-env",
            "BANDWIDTH_API_ENDPOINT": "https://catapult.example.com",
            "BANDWIDTH_API_VERSION": "v9"
        })

        client = CatapultClient.from_env(dotenv_path=tmp_path / "missing.env")

        assert client.user_id == "u-env"
        assert client.base_url == "https://catapult.example.com"
        assert client.api_version == "v9"

    def test_numbers_from_dotenv_file(self, isolated_environ, tmp_path):
        """Values missing from the process environment come from the .env file"""
        env_file = tmp_path / ".env"
        env_file.write_text(
            "BANDWIDTH_ACCOUNT_ID=from-file\n"
            "BANDWIDTH_USERNAME=user-file\n"
            "BANDWIDTH_PASSWORD=pass-file\n"
        )
        isolated_environ["BANDWIDTH_USERNAME"] = "user-env"

        settings = load_env_settings("Numbers", dotenv_path=env_file)

        assert settings == {
            "account_id": "from-file",
            "username": "user-env",
            "password": "pass-file"
        }

    def test_from_env_overrides(self, isolated_environ, tmp_path):
        """Keyword overrides win over the environment"""
        isolated_environ.update({
            "BANDWIDTH_ACCOUNT_ID": "1",
            "BANDWIDTH_USERNAME": "user",
            "BANDWIDTH_PASSWORD": "pass"
        })

        client = NumbersClient.from_env(dotenv_path=tmp_path / "missing.env",
                                        base_url="https://numbers.example.com")

        assert client.base_url == "https://numbers.example.com"
        assert client.account_id == "1"

    def test_from_env_without_credentials(self, isolated_environ, tmp_path):
        """Missing variables surface as ConfigurationError"""
        with pytest.raises(ConfigurationError) as exc_info:
            CatapultClient.from_env(dotenv_path=tmp_path / "missing.env")

        assert exc_info.value.missing_fields == ["user_id", "api_token", "api_secret"]
