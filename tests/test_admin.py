import pytest

from ava_cloudflare.admin import INVALID_TOKEN_MESSAGE, NOT_CONFIGURED_MESSAGE, AdminPage
from ava_cloudflare.utils.cf_cache import CachePurgeClient

PURGE_FORM = {"action": "purge", "_token": "good"}


@pytest.fixture
def page(settings, make_transport):
    def factory(transport=None, settings=settings):
        transport = transport or make_transport(json={"success": True})
        return AdminPage(settings, lambda token: token == "good", CachePurgeClient(transport=transport))

    return factory


def test_get_shows_status(page):
    view = page().handle("GET")

    assert view.configured
    assert view.zone_id == "01234567..."
    assert view.api_token == "••••••••9876"
    assert view.message is None
    assert view.message_type is None


def test_post_purges(page, settings, make_transport):
    transport = make_transport(json={"success": True})
    view = page(transport).handle("POST", PURGE_FORM)

    assert view.message == "Cloudflare cache purged successfully"
    assert view.message_type == "success"
    assert len(transport.requests) == 1
    assert settings.log_file.exists()


def test_post_reports_api_error(page, make_transport):
    transport = make_transport(400, json={"success": False, "errors": [{"message": "Invalid zone"}]})
    view = page(transport).handle("POST", PURGE_FORM)

    assert view.message == "Cloudflare API error: Invalid zone"
    assert view.message_type == "error"


def test_post_bad_csrf_token(page, make_transport):
    transport = make_transport(json={"success": True})
    view = page(transport).handle("POST", {"action": "purge", "_token": "bad"})

    assert view.message == INVALID_TOKEN_MESSAGE
    assert view.message_type == "error"
    assert transport.requests == []


def test_post_not_configured(page, settings, make_transport):
    transport = make_transport(json={"success": True})
    unconfigured = settings.copy(update={"zone_id": "", "api_token": ""})
    view = page(transport, unconfigured).handle("POST", PURGE_FORM)

    assert view.message == NOT_CONFIGURED_MESSAGE
    assert view.message_type == "error"
    assert view.zone_id is None
    assert view.api_token is None
    assert not view.configured
    assert transport.requests == []


def test_post_other_action_is_ignored(page, make_transport):
    transport = make_transport(json={"success": True})
    view = page(transport).handle("POST", {"action": "rebuild", "_token": "good"})

    assert view.message is None
    assert transport.requests == []


def test_post_reports_success_when_log_is_unwritable(page, settings, make_transport, tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    transport = make_transport(json={"success": True})

    view = page(transport, settings.copy(update={"storage_path": blocker})).handle("POST", PURGE_FORM)

    assert view.message == "Cloudflare cache purged successfully"
    assert view.message_type == "success"
