from pathlib import Path

from webdriver_wire.config import load_config
from webdriver_wire.factory import build_driver
from webdriver_wire.models import DEFAULT_BASE_URL


def test_load_config_defaults(tmp_path: Path) -> None:
    config = load_config(env_file=tmp_path / "missing.env")

    assert config.base_url == DEFAULT_BASE_URL
    assert config.timeout == 60.0
    assert config.browser == "firefox"


def test_load_config_reads_env_file(tmp_path: Path) -> None:
    env_path = tmp_path / ".env"
    env_path.write_text(
        "\n".join(
            [
                "WEBDRIVER_WIRE_BASE_URL=http://grid:4444/wd/hub",
                "WEBDRIVER_WIRE_TIMEOUT=5",
                "WEBDRIVER_WIRE_BROWSER=chrome",
            ]
        )
    )

    config = load_config(env_file=env_path)

    assert config.base_url == "http://grid:4444/wd/hub"
    assert config.timeout == 5.0
    assert config.browser == "chrome"


def test_load_config_prioritises_overrides(tmp_path: Path) -> None:
    env_path = tmp_path / ".env"
    env_path.write_text(
        "\n".join(
            [
                "WEBDRIVER_WIRE_BASE_URL=http://env:4444/wd/hub",
                "WEBDRIVER_WIRE_BROWSER=chrome",
            ]
        )
    )

    config_path = tmp_path / "client.yaml"
    config_path.write_text(
        "\n".join(
            [
                "base_url: http://file:4444/wd/hub",
                "desired_capabilities:",
                "  javascriptEnabled: true",
            ]
        )
    )

    config = load_config(
        config_path,
        env_file=env_path,
        desired_capabilities={"acceptSslCerts": False},
    )

    assert config.base_url == "http://file:4444/wd/hub"
    assert config.browser == "chrome"
    assert config.desired_capabilities == {"javascriptEnabled": True, "acceptSslCerts": False}


def test_build_driver_uses_configured_url(tmp_path: Path) -> None:
    config = load_config(env_file=tmp_path / "missing.env", base_url="http://grid:4444/wd/hub/")

    with build_driver(config) as driver:
        assert driver.base_url == "http://grid:4444/wd/hub"
