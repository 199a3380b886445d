"""Tests for the public landing page."""

import re

import httpx
from fastapi.testclient import TestClient

from src.linkshort.config import settings


def main_content(html: str) -> str:
    """Return the page body without the layout header."""
    return html.split("<main>", 1)[1].split("</main>", 1)[0]


def test_landing_renders_signed_out(client: TestClient) -> None:
    """Test landing page renders for anonymous visitors."""
    response = client.get("/")

    assert response.status_code == 200
    assert "Amplify Reach" in response.text
    assert f"<title>{settings.site_title}</title>" in response.text


def test_landing_renders_signed_in(signed_in_client: TestClient) -> None:
    """Test landing page does not redirect signed-in users."""
    response = signed_in_client.get("/")

    assert response.status_code == 200
    assert "Amplify Reach" in response.text


def test_landing_body_independent_of_session(signed_in_client: TestClient) -> None:
    """Test that only the shell differs between signed-out and signed-in visits."""
    signed_in = signed_in_client.get("/").text
    signed_in_client.cookies.clear()
    signed_out = signed_in_client.get("/").text

    assert main_content(signed_in) == main_content(signed_out)
    assert signed_in != signed_out


def test_both_calls_to_action_link_to_dashboard(client: TestClient) -> None:
    """Test that the hero and closing buttons point at the dashboard."""
    html = client.get("/").text

    ctas = re.findall(r'<a href="([^"]+)" class="button cta" data-cta="(\w+)"', html)

    assert sorted(name for _, name in ctas) == ["closing", "hero"]
    assert all(href == "/dashboard" for href, _ in ctas)


def test_landing_lists_features(client: TestClient) -> None:
    """Test that all four feature cards render."""
    html = client.get("/").text

    for title in ("Quick Shortening", "Analytics", "Lightning Fast", "Secure &amp; Reliable"):
        assert title in html


def test_landing_survives_provider_failure(
    client: TestClient, mock_jwt_validator, session_token: str
) -> None:
    """Test that the landing page degrades to the signed-out shell."""
    mock_jwt_validator.verify_token.side_effect = httpx.ConnectError("JWKS unreachable")
    client.cookies.set(settings.session_cookie_name, session_token)

    response = client.get("/")

    assert response.status_code == 200
    assert 'data-shell="signed-out"' in response.text
