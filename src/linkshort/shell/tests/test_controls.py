"""Tests for session-conditional shell controls."""

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from src.linkshort.auth.models import SessionUser
from src.linkshort.config import settings
from src.linkshort.shell import AccountControl, AuthLinks, ShellControls, build_shell, templates


def render_header(shell: ShellControls) -> str:
    return templates.get_template("partials/header.html").render(shell=shell, landing_path="/")


class TestBuildShell:
    """Tests for build_shell."""

    def test_signed_out_gets_auth_links(self):
        shell = build_shell(None)

        assert not shell.signed_in
        assert shell.account is None
        assert shell.auth_links.sign_in_url == settings.sign_in_url
        assert shell.auth_links.sign_up_url == settings.sign_up_url

    def test_signed_in_gets_account_control(self):
        shell = build_shell(SessionUser(id="user_2abc"))

        assert shell.signed_in
        assert shell.auth_links is None
        assert shell.account.user_id == "user_2abc"
        assert shell.account.profile_url == settings.user_profile_url

    def test_neither_control_set_is_invalid(self):
        with pytest.raises(ValidationError):
            ShellControls()

    def test_both_control_sets_is_invalid(self):
        with pytest.raises(ValidationError):
            ShellControls(
                auth_links=AuthLinks(sign_in_url="/in", sign_up_url="/up"),
                account=AccountControl(user_id="user_2abc", profile_url="/user"),
            )


class TestHeaderTemplate:
    """Tests for the header partial."""

    def test_signed_out_header(self):
        html = render_header(build_shell(None))

        assert 'data-shell="signed-out"' in html
        assert 'data-shell="signed-in"' not in html
        assert f'href="{settings.sign_in_url}"' in html
        assert f'href="{settings.sign_up_url}"' in html

    def test_signed_in_header(self):
        html = render_header(build_shell(SessionUser(id="user_2abc")))

        assert 'data-shell="signed-in"' in html
        assert 'data-shell="signed-out"' not in html
        assert settings.sign_in_url not in html
        assert f'href="{settings.user_profile_url}"' in html

    def test_logo_links_home(self):
        html = render_header(build_shell(None))

        assert '<a href="/" class="logo"' in html


def test_pages_render_exactly_one_control_set(signed_in_client: TestClient) -> None:
    """Test both pages carry one control set for a signed-in user."""
    for path in ("/", "/dashboard"):
        html = signed_in_client.get(path).text
        assert html.count("data-shell=") == 1
        assert 'data-shell="signed-in"' in html
