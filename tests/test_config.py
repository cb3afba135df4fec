import pytest

from asaas import ENVIRONMENTS, AsaasClient, AsaasConfig, AsaasConfigError

SANDBOX_TOKEN = "$aact_hmlg_000MzkwODA2MWY2OGM3MWRlMDU2NWM3MzJlNzZmNGZhZGY6OjAwMDAwMDAwMDAwMDAwNjY1NzQ6OiRhYWNoXzk5"
PROD_TOKEN = "$aact_prod_000MzkwODA2MWY2OGM3MWRlMDU2NWM3MzJlNzZmNGZhZGY6OjAwMDAwMDAwMDAwMDAwNjY1NzQ6OiRhYWNoXzEx"


def test_defaults_to_sandbox():
    cfg = AsaasConfig(access_token=SANDBOX_TOKEN)
    assert cfg.environment == "sandbox"
    assert cfg.base_url == ENVIRONMENTS["sandbox"] == "https://sandbox.asaas.com/api/v3"
    assert cfg.timeout == 30.0
    assert cfg.retries == 0
    assert cfg.backoff_factor == 0.5
    assert cfg.debug is False
    assert cfg.is_production is False


def test_environment_variables_are_read(monkeypatch):
    monkeypatch.setenv("ASAAS_ACCESS_TOKEN", PROD_TOKEN)
    monkeypatch.setenv("ASAAS_ENV", "production")
    monkeypatch.setenv("ASAAS_TIMEOUT", "12.5")
    monkeypatch.setenv("ASAAS_RETRIES", "3")
    monkeypatch.setenv("ASAAS_WEBHOOK_TOKEN", "whk-secret")

    cfg = AsaasConfig.from_env()
    assert cfg.access_token == PROD_TOKEN
    assert cfg.base_url == "https://api.asaas.com/v3"
    assert cfg.timeout == 12.5
    assert cfg.retries == 3
    assert cfg.webhook_token == "whk-secret"
    assert cfg.is_production


def test_explicit_arguments_win_over_environment(monkeypatch):
    monkeypatch.setenv("ASAAS_ENV", "production")
    monkeypatch.setenv("ASAAS_TIMEOUT", "99")
    cfg = AsaasConfig(access_token=SANDBOX_TOKEN, environment="sandbox", timeout=5)
    assert cfg.environment == "sandbox"
    assert cfg.timeout == 5.0


def test_invalid_numeric_env_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("ASAAS_TIMEOUT", "soon")
    assert AsaasConfig(access_token=SANDBOX_TOKEN).timeout == 30.0


@pytest.mark.parametrize("alias, expected", [("prod", "production"), ("LIVE", "production"), ("hmlg", "sandbox")])
def test_environment_aliases(alias, expected):
    assert AsaasConfig(access_token="x" * 20, environment=alias).environment == expected


def test_base_url_override_strips_trailing_slash():
    cfg = AsaasConfig(access_token=SANDBOX_TOKEN, base_url="http://localhost:8080/v3/")
    assert cfg.base_url == "http://localhost:8080/v3"


def test_validate_requires_token():
    with pytest.raises(AsaasConfigError, match="ASAAS_ACCESS_TOKEN"):
        AsaasConfig().validate()


def test_validate_rejects_unknown_environment():
    with pytest.raises(AsaasConfigError, match="Unknown environment"):
        AsaasConfig(access_token=SANDBOX_TOKEN, environment="staging").validate()


def test_validate_rejects_key_from_other_environment():
    with pytest.raises(AsaasConfigError, match="production key"):
        AsaasConfig(access_token=PROD_TOKEN, environment="sandbox").validate()


def test_masked_hides_secrets():
    cfg = AsaasConfig(access_token=SANDBOX_TOKEN, webhook_token="whk-secret")
    m = cfg.masked()
    assert SANDBOX_TOKEN not in str(m)
    assert m["access_token"].startswith("$aact_hmlg_***")
    assert m["webhook_token"] == "***"


def test_copy_with_switches_environment_and_base_url():
    cfg = AsaasConfig(access_token=SANDBOX_TOKEN)
    prod = cfg.copy_with(environment="production", access_token=PROD_TOKEN)
    assert prod.base_url == ENVIRONMENTS["production"]
    assert prod.validate() is prod
    assert cfg.base_url == ENVIRONMENTS["sandbox"]


def test_copy_with_keeps_explicit_base_url():
    cfg = AsaasConfig(access_token=SANDBOX_TOKEN, base_url="http://mock/v3")
    assert cfg.copy_with(timeout=1).base_url == "http://mock/v3"
    assert cfg.copy_with(environment="production").base_url == "http://mock/v3"


def test_explicit_debug_turns_on_sdk_output(capsys):
    cfg = AsaasConfig(access_token=SANDBOX_TOKEN, debug=True)
    out = capsys.readouterr().out
    assert "[AsaasSDK]" in out
    assert "[Config] Loaded config:" in out
    assert SANDBOX_TOKEN not in out
    assert cfg.debug is True

    AsaasConfig(access_token=SANDBOX_TOKEN, debug=False)
    AsaasClient(AsaasConfig(access_token=SANDBOX_TOKEN)).close()
    assert capsys.readouterr().out == ""
