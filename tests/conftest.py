"""
Shared pytest fixtures for domsafe tests.

This module provides:
- Configuration fixtures (default, strict, YAML file)
- Target element fixtures for the insertion helpers
- Payload corpora shared by the property-style tests
"""
from __future__ import annotations

import pytest

from domsafe.config import Config, SafetyConfig
from domsafe.nodes import ElementNode


# ==============================================================================
# Configuration fixtures
# ==============================================================================

@pytest.fixture
def default_config():
    """Return default configuration."""
    return Config()


@pytest.fixture
def quiet_config():
    """Return configuration that does not warn on empty results."""
    return Config(warn_on_empty=False)


@pytest.fixture
def strict_config():
    """Return configuration with the tightened style check."""
    return Config(strict_css=True, warn_on_empty=False)


@pytest.fixture
def shallow_config():
    """Return configuration with a tiny nesting limit."""
    return Config(safety=SafetyConfig(max_depth=3))


@pytest.fixture
def temp_config(tmp_path):
    """Write a config file to a temporary location and return its path."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("strict_css: true\nsafety:\n  max_depth: 64\n")
    return config_path


# ==============================================================================
# Target fixtures
# ==============================================================================

@pytest.fixture
def target():
    """Return an empty container element."""
    return ElementNode("div")


# ==============================================================================
# Payload corpora
# ==============================================================================

XSS_PAYLOADS = [
    '<p>Safe</p><script>alert(1)</script>',
    '<img src=x onerror=alert(1)>',
    '<a href="JaVaScRiPt:alert(1)">x</a>',
    '<a href="java&#x09;script:alert(1)">x</a>',
    '<svg onload=alert(1)><circle r="5"/></svg>',
    '<div style="background:url(javascript:alert(1))">x</div>',
    '<p>javascript&#58;alert(1)</p>',
    '<scr<script>x</script>ipt>alert(1)</script>',
    '<iframe src="data:text/html,<script>alert(1)</script>"></iframe>',
    '<p>on<foo>click=x</foo></p>',
    '<div data-onclick="x">y</div>',
    '<math><mi xlink:href="javascript:alert(1)">x</mi></math>',
    "<a href=\"/ok\" onmouseover = 'x()'>ok</a>",
    '<p class="a onb=c">t</p>',
    '<<script>script>alert(1)<</script>/script>',
    '<a href="https://x.com" target="_blank" rel="opener">L</a>',
    '<base href="javascript:alert(1)//">',
    '<object data="data:text/html;base64,PHNjcmlwdD4="></object>',
    '<p>&lt;script&gt;alert(1)&lt;/script&gt;</p>',
    '<style>*{x:expression(alert(1))}</style><p>s</p>',
    '<div><section><em>deep</em></section></div>',
    '<input type="text" placeholder="Search" data-i18n-placeholder="search.hint">',
    '<p>data&#58;text/html,boom</p>',
    '<div onclick&#61;"x">y</div>',
    '<a href="#top" target="_top">up</a>',
    "Plain text & more <b>bold",
]


@pytest.fixture(params=XSS_PAYLOADS)
def payload(request):
    """Each hostile or awkward input in turn."""
    return request.param
