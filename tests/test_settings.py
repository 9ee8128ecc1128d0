"""Tests for settings, logging setup and service wiring."""

import logging

import pytest

from grandstrand import create_services
from grandstrand.domain import Contact, Task
from grandstrand.infrastructure import Settings, configure_logging, load_settings
from grandstrand.infrastructure import settings as settings_module


def test_defaults_when_environment_empty() -> None:
    settings = load_settings({})
    assert settings.log_level == "INFO"
    assert settings.phone_region == "US"


def test_values_normalized() -> None:
    settings = load_settings(
        {"GRANDSTRAND_LOG_LEVEL": "debug", "GRANDSTRAND_PHONE_REGION": " gb "}
    )
    assert settings.log_level == "DEBUG"
    assert settings.phone_region == "GB"


@pytest.mark.parametrize(
    "environ",
    [
        {"GRANDSTRAND_LOG_LEVEL": "chatty"},
        {"GRANDSTRAND_PHONE_REGION": "USA"},
        {"GRANDSTRAND_PHONE_REGION": ""},
    ],
)
def test_invalid_values_rejected(environ) -> None:
    with pytest.raises(ValueError):
        load_settings(environ)


def test_reads_os_environ_and_dotenv(tmp_path, monkeypatch) -> None:
    (tmp_path / ".env").write_text("GRANDSTRAND_PHONE_REGION=CA\n")
    monkeypatch.setattr(settings_module, "_REPO_ROOT", tmp_path)
    # setenv first so teardown also removes the value load_dotenv writes
    monkeypatch.setenv("GRANDSTRAND_PHONE_REGION", "XX")
    monkeypatch.delenv("GRANDSTRAND_PHONE_REGION")
    monkeypatch.setenv("GRANDSTRAND_LOG_LEVEL", "warning")

    settings = load_settings()
    assert settings.phone_region == "CA"
    assert settings.log_level == "WARNING"


def test_configure_logging_accepts_names(monkeypatch) -> None:
    seen = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: seen.update(kw))
    configure_logging("debug")
    assert seen["level"] == logging.DEBUG
    assert "%(levelname)s" in seen["format"]


def test_create_services_are_independent() -> None:
    services = create_services(Settings(phone_region="US"))
    services.tasks.add_task(Task("1", "Name", "Description"))
    services.contacts.add_contact(Contact("1", "A", "B", "2025551234", "x"))

    assert len(services.tasks) == 1
    assert len(services.contacts) == 1
    assert len(services.appointments) == 0
    assert services.contacts.international_phone_number("1") == "+12025551234"


def test_create_services_returns_fresh_instances() -> None:
    first = create_services(Settings())
    second = create_services(Settings())
    first.tasks.add_task(Task("1", "", ""))
    assert second.tasks.get_task("1") is None
