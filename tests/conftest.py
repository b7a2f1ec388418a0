"""
Shared fixtures for Groundwork Helpers tests.

Provides builders for block style stylesheet directories and a config reset
so module-level state never leaks between tests.
"""

import json

import pytest

from src.core import config as config_module
from src.core import drush as drush_module


def component_block(name, description=None):
    """Docblock declaring one block style component."""
    lines = ["/**", " * @blockStyleComponent true", f" * @name {name}"]
    if description is not None:
        lines.append(f" * @description {description}")
    lines.append(" */")
    return "\n".join(lines) + "\n"


def header_block(category=None, order=None, description=None):
    """Leading docblock carrying file-level metadata."""
    lines = ["/**"]
    if category is not None:
        lines.append(f" * @category {category}")
    if order is not None:
        lines.append(f" * @order {order}")
    if description is not None:
        lines.append(f" * @description {description}")
    lines.append(" */")
    return "\n".join(lines) + "\n"


@pytest.fixture
def styles_dir(tmp_path):
    """Empty block style directory."""
    path = tmp_path / "css" / "block-style-components"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def write_stylesheet(styles_dir):
    """Factory writing a stylesheet with an optional header and components."""

    def _write(filename, components=(), category=None, order=None, description=None, extra=""):
        content = ""
        if any(value is not None for value in (category, order, description)):
            content += header_block(category, order, description)
        for component in components:
            if isinstance(component, tuple):
                content += component_block(*component)
            else:
                content += component_block(component)
            content += ".rule { color: inherit; }\n"
        content += extra
        path = styles_dir / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def drupal_root(tmp_path):
    """Drupal codebase with a Groundwork theme under web/themes/custom."""
    root = tmp_path / "drupal"
    theme = root / "web" / "themes" / "custom" / "groundwork"
    (theme / "css" / "block-style-components").mkdir(parents=True)
    (theme / "groundwork.info.yml").write_text(
        "name: Groundwork\ntype: theme\ncore_version_requirement: ^10\n"
    )
    return root


@pytest.fixture
def config_file(tmp_path, drupal_root, monkeypatch):
    """Write config.json and point the loader at it."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"drupal_root": str(drupal_root)}))
    monkeypatch.setattr(config_module, "CONFIG_PATH", path)
    return path


@pytest.fixture(autouse=True)
def reset_state():
    """Clear cached config and drush detection around every test."""
    config_module.reset_config()
    drush_module.reset_drush_command()
    yield
    config_module.reset_config()
    drush_module.reset_drush_command()
